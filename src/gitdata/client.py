"""Core GitHub client: request builder, executor, and response envelope."""

from __future__ import annotations

import json as jsonlib
import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping, Optional
from urllib.parse import parse_qs, urljoin, urlparse

import requests

from .errors import ErrorResponse, ResponseDecodeError, TransportError
from .resources.git import Git

DEFAULT_BASE_URL = os.environ.get("GITHUB_API_URL", "https://api.github.com/")
DEFAULT_TOKEN = os.environ.get("GITHUB_TOKEN")
DEFAULT_USER_AGENT = "gitdata-python"
API_VERSION = "2022-11-28"
MEDIA_TYPE = "application/vnd.github+json"


@dataclass(frozen=True)
class Rate:
    """Rate limit state reported by the ``X-RateLimit-*`` headers."""

    limit: Optional[int] = None
    remaining: Optional[int] = None
    used: Optional[int] = None
    reset: Optional[datetime] = None


def _int_header(headers: Mapping[str, str], name: str) -> Optional[int]:
    value = headers.get(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _parse_rate(headers: Mapping[str, str]) -> Rate:
    reset = _int_header(headers, "X-RateLimit-Reset")
    return Rate(
        limit=_int_header(headers, "X-RateLimit-Limit"),
        remaining=_int_header(headers, "X-RateLimit-Remaining"),
        used=_int_header(headers, "X-RateLimit-Used"),
        reset=datetime.fromtimestamp(reset, tz=timezone.utc) if reset is not None else None,
    )


def _page_from_link(link: Optional[Mapping[str, str]]) -> Optional[int]:
    if not link or not link.get("url"):
        return None
    pages = parse_qs(urlparse(link["url"]).query).get("page")
    if not pages:
        return None
    try:
        return int(pages[0])
    except ValueError:
        return None


class Response:
    """Metadata accompanying an API reply: status, headers, paging and rate hints.

    The decoded body is returned separately by :meth:`GitHub.do`.
    """

    def __init__(self, raw: requests.Response) -> None:
        self.raw = raw
        self.status_code: int = raw.status_code
        self.headers: Mapping[str, str] = raw.headers
        self.url: Optional[str] = getattr(raw, "url", None)

        links = getattr(raw, "links", None) or {}
        self.next_page = _page_from_link(links.get("next"))
        self.prev_page = _page_from_link(links.get("prev"))
        self.first_page = _page_from_link(links.get("first"))
        self.last_page = _page_from_link(links.get("last"))
        self.rate = _parse_rate(self.headers)

    def __repr__(self) -> str:
        return f"<Response [{self.status_code}] {self.url}>"


class GitHub:
    """Resource-grouped client for the GitHub REST API."""

    git: Git

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        user_agent: Optional[str] = None,
        default_timeout: int = 20,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Create a GitHub client bound to an API instance.

        Parameters
        ----------
        base_url
            API root, e.g. ``https://api.github.com/`` or a GitHub Enterprise
            ``https://host/api/v3/``. A trailing slash is added when missing.
        token
            Token sent as a bearer ``Authorization`` header. Falls back to
            ``GITHUB_TOKEN``.
        user_agent
            ``User-Agent`` header value.
        default_timeout
            Default request timeout in seconds.
        session
            Optional requests session to reuse connections.
        """
        base_url = base_url or DEFAULT_BASE_URL
        if not base_url.endswith("/"):
            base_url += "/"
        self.base_url = base_url
        self.token = token if token is not None else DEFAULT_TOKEN
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.default_timeout = default_timeout
        self._logger = logging.getLogger(__name__)
        self._session = session

        self.git: Git = Git(self)

    def new_request(
        self,
        method: str,
        path: str,
        body: Optional[Mapping[str, Any]] = None,
    ) -> requests.PreparedRequest:
        """Build an API request without sending it.

        Parameters
        ----------
        method
            HTTP method (GET, POST, PATCH, DELETE).
        path
            Endpoint path relative to ``base_url``, e.g. ``repos/o/r/git/tags``.
        body
            Mapping encoded as the JSON request body.

        Raises
        ------
        TypeError, ValueError
            If ``body`` cannot be encoded as JSON.
        """
        path = path.lstrip("/")
        url = urljoin(self.base_url, path)

        headers = {
            "Accept": MEDIA_TYPE,
            "X-GitHub-Api-Version": API_VERSION,
            "User-Agent": self.user_agent,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        data = None
        if body is not None:
            data = jsonlib.dumps(body, allow_nan=False, separators=(",", ":"))
            headers["Content-Type"] = "application/json"

        return requests.Request(method, url, headers=headers, data=data).prepare()

    def do(
        self,
        request: requests.PreparedRequest,
        *,
        timeout: Optional[float] = None,
    ) -> tuple[Optional[Any], Response]:
        """Send a prepared request and decode its JSON reply.

        Returns
        -------
        tuple
            ``(payload, response)``; ``payload`` is ``None`` for an empty body.

        Raises
        ------
        TransportError
            The request could not be completed. ``response`` wraps the partial
            response ``requests`` attached to the error, or is ``None``.
        ErrorResponse
            The API replied with a non-2xx status.
        ResponseDecodeError
            The body of a successful reply was not JSON.
        """
        effective_timeout = timeout if timeout is not None else self.default_timeout
        try:
            if self._session is not None:
                raw = self._session.send(request, timeout=effective_timeout)
            else:
                with requests.Session() as session:
                    raw = session.send(request, timeout=effective_timeout)
        except requests.RequestException as exc:
            self._logger.warning("Request failed for %s %s: %s", request.method, request.url, exc)
            partial = getattr(exc, "response", None)
            response = Response(partial) if partial is not None else None
            raise TransportError(str(exc), response=response) from exc

        response = Response(raw)
        if not 200 <= raw.status_code < 300:
            error = _error_from_response(raw, response)
            self._logger.warning("Request failed for %s %s: %s", request.method, request.url, error)
            raise error

        if not raw.content:
            return None, response
        try:
            payload = raw.json()
        except ValueError as exc:
            self._logger.warning("Response from %s %s was not JSON", request.method, request.url)
            raise ResponseDecodeError(f"invalid JSON in response: {exc}", response=response) from exc
        return payload, response

    def request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[Mapping[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> tuple[Optional[Any], Response]:
        """Build and send a raw request to the API."""
        prepared = self.new_request(method, path, json)
        return self.do(prepared, timeout=timeout)


def _error_from_response(raw: requests.Response, response: Response) -> ErrorResponse:
    """Build an :class:`ErrorResponse` from a GitHub error body, if any."""
    message = getattr(raw, "reason", None) or "request failed"
    errors = None
    documentation_url = None
    try:
        body = raw.json() if raw.content else None
    except ValueError:
        body = None
    if isinstance(body, dict):
        if isinstance(body.get("message"), str):
            message = body["message"]
        if isinstance(body.get("errors"), list):
            errors = body["errors"]
        if isinstance(body.get("documentation_url"), str):
            documentation_url = body["documentation_url"]
    return ErrorResponse(
        message,
        response=response,
        errors=errors,
        documentation_url=documentation_url,
    )


__all__ = [
    "API_VERSION",
    "DEFAULT_BASE_URL",
    "GitHub",
    "Rate",
    "Response",
]
