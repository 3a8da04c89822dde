"""Base resource helpers."""

from __future__ import annotations

from typing import Any, Mapping, Optional, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from ..client import GitHub, Response


class Resource:
    """Shared helpers for resource classes."""

    def __init__(self, client: "GitHub") -> None:
        self._client = client

    @property
    def _logger(self):
        return self._client._logger

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[Mapping[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> tuple[Optional[Any], "Response"]:
        return self._client.request(method, path, json=json, timeout=timeout)

    def _get(
        self,
        path: str,
        *,
        timeout: Optional[float] = None,
    ) -> tuple[Optional[Any], "Response"]:
        return self._request("GET", path, timeout=timeout)

    def _post(
        self,
        path: str,
        *,
        json: Optional[Mapping[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> tuple[Optional[Any], "Response"]:
        return self._request("POST", path, json=json, timeout=timeout)
