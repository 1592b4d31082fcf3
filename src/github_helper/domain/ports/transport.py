"""Port: HTTP transport — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Any, Protocol

import httpx


class Transport(Protocol):
    """Abstract contract for sending requests to the GitHub API."""

    async def get(self, path: str, params: dict[str, str] | None = None) -> httpx.Response:
        """GET a path relative to the API root."""
        ...

    async def get_absolute(self, url: str) -> httpx.Response:
        """GET a fully-qualified URL (e.g. a ``url`` field from a previous payload)."""
        ...

    async def post(self, path: str, payload: dict[str, Any]) -> httpx.Response:
        """POST a JSON body to a path relative to the API root."""
        ...
