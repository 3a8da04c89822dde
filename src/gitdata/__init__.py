"""Public package surface for the gitdata GitHub client."""

from .client import DEFAULT_BASE_URL, GitHub, Rate, Response
from .errors import ErrorResponse, GitHubError, ResponseDecodeError, TransportError
from .resources.git_types import CommitAuthor, GitObject, SignatureVerification, Tag


__all__ = [
    "CommitAuthor",
    "DEFAULT_BASE_URL",
    "ErrorResponse",
    "GitHub",
    "GitHubError",
    "GitObject",
    "Rate",
    "Response",
    "ResponseDecodeError",
    "SignatureVerification",
    "Tag",
    "TransportError",
]
