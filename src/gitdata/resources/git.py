"""Git data resource wrapper (annotated tag objects)."""

from __future__ import annotations

from typing import Any, Optional, TYPE_CHECKING

from ..errors import ResponseDecodeError
from .base import Resource
from .git_types import Tag, decode_tag, tag_to_create_request

if TYPE_CHECKING:  # pragma: no cover
    from ..client import Response


class Git(Resource):
    """Operations on the ``repos/{owner}/{repo}/git`` endpoints."""

    def get_tag(
        self,
        owner: str,
        repo: str,
        sha: str,
        *,
        timeout: Optional[float] = None,
    ) -> tuple[Tag, "Response"]:
        """Fetch an annotated tag object by SHA.

        GitHub API docs: https://docs.github.com/rest/git/tags#get-a-tag

        Parameters
        ----------
        owner
            Repository owner (user or organization).
        repo
            Repository name.
        sha
            SHA of the tag object. Not validated; the API decides.
        timeout
            Request timeout in seconds.

        Returns
        -------
        tuple[Tag, Response]
            The decoded tag and the response metadata.

        Raises
        ------
        GitHubError
            On transport or API failure. ``error.response`` carries the
            response metadata when there was a response.
        """
        path = f"repos/{owner}/{repo}/git/tags/{sha}"
        payload, response = self._get(path, timeout=timeout)
        return self._decode(payload, response), response

    def create_tag(
        self,
        owner: str,
        repo: str,
        tag: Optional[Tag],
        *,
        timeout: Optional[float] = None,
    ) -> tuple[Tag, "Response"]:
        """Create an annotated tag object.

        This only creates the tag object; a ``refs/tags/*`` reference still has
        to be created separately for the tag to show up by name.

        GitHub API docs: https://docs.github.com/rest/git/tags#create-a-tag-object

        Parameters
        ----------
        owner
            Repository owner (user or organization).
        repo
            Repository name.
        tag
            Candidate tag. Only ``tag``, ``message``, ``tagger`` and the
            ``sha``/``type`` of ``object`` are sent.
        timeout
            Request timeout in seconds.

        Returns
        -------
        tuple[Tag, Response]
            The created tag and the response metadata.

        Raises
        ------
        ValueError
            If ``tag`` is ``None``. No request is sent.
        GitHubError
            On transport or API failure.
        """
        if tag is None:
            raise ValueError("tag must be provided")

        path = f"repos/{owner}/{repo}/git/tags"
        body = tag_to_create_request(tag)
        self._logger.debug("Creating tag object %s in %s/%s", body.get("tag"), owner, repo)
        payload, response = self._post(path, json=body, timeout=timeout)
        return self._decode(payload, response), response

    @staticmethod
    def _decode(payload: Optional[Any], response: "Response") -> Tag:
        if payload is None:
            return {}
        if not isinstance(payload, dict):
            raise ResponseDecodeError(
                f"expected a JSON object, got {type(payload).__name__}",
                response=response,
            )
        return decode_tag(payload)
