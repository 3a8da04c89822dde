"""Exceptions raised by the GitHub client."""

from __future__ import annotations

from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .client import Response


class GitHubError(Exception):
    """Base error for failures during or after a request round-trip.

    ``response`` holds whatever response metadata the transport produced, or
    ``None`` when the request never got a response.
    """

    def __init__(self, message: str, *, response: Optional["Response"] = None) -> None:
        super().__init__(message)
        self.response = response


class TransportError(GitHubError):
    """Connectivity failure, timeout, or other error raised by ``requests``."""


class ResponseDecodeError(GitHubError):
    """Successful status, but the body was not the expected JSON shape."""


class ErrorResponse(GitHubError):
    """Non-2xx reply from the API."""

    def __init__(
        self,
        message: str,
        *,
        response: Optional["Response"] = None,
        errors: Optional[list[Any]] = None,
        documentation_url: Optional[str] = None,
    ) -> None:
        super().__init__(message, response=response)
        self.message = message
        self.errors = errors or []
        self.documentation_url = documentation_url

    @property
    def status_code(self) -> Optional[int]:
        return self.response.status_code if self.response is not None else None

    def __str__(self) -> str:
        text = self.message
        if self.response is not None:
            text = f"{self.response.status_code} {self.message}"
        if self.errors:
            text = f"{text} {self.errors}"
        return text


__all__ = ["ErrorResponse", "GitHubError", "ResponseDecodeError", "TransportError"]
