"""CLI demo that exercises the :class:`gitdata.GitHub` tag helpers.

Run with the virtual environment activated::

    python examples/demo_git_tags.py OWNER REPO TAG_SHA

Set ``GITHUB_TOKEN`` for authenticated requests, and ``GITHUB_API_URL`` when
talking to a GitHub Enterprise instance.
"""

import logging
import os
import sys
from pprint import pprint

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from gitdata import GitHub, GitHubError

logging.basicConfig(level=logging.INFO)

def main() -> None:
    if len(sys.argv) != 4:
        print(__doc__)
        sys.exit(2)
    owner, repo, sha = sys.argv[1:]

    github = GitHub()
    try:
        tag, response = github.git.get_tag(owner, repo, sha)
    except GitHubError as exc:
        status = exc.response.status_code if exc.response is not None else "--"
        print(f"Could not fetch tag {sha} [{status}]: {exc}")
        sys.exit(1)

    print(f"Fetched tag {tag.get('tag')} -> {tag.get('object', {}).get('sha')}")
    print(f"Rate limit remaining: {response.rate.remaining}")
    pprint(tag)


if __name__ == "__main__":
    main()
