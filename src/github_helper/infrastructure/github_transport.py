"""GitHub REST API transport — implements the Transport port."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from github_helper.domain.exceptions import TransportError
from github_helper.infrastructure.config import Settings

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"
_USER_AGENT = "github-helper/1.0"


class GitHubTransport:
    """Concrete Transport backed by a shared ``httpx.AsyncClient``.

    Responses are handed back untouched, whatever their status code;
    classifying them is the caller's job.  Only failures to obtain a response
    at all are raised, as :class:`TransportError`.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: str | None = None,
        *,
        api_url: str = _GITHUB_API,
        user_agent: str = _USER_AGENT,
    ) -> None:
        self._client = client
        self._api_url = api_url.rstrip("/")
        self._headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": user_agent,
        }
        if token:
            self._headers["Authorization"] = f"Bearer {token}"

    @classmethod
    def from_settings(cls, client: httpx.AsyncClient, settings: Settings) -> GitHubTransport:
        """Build a transport using the configured token, API root and user agent."""
        token = settings.github_token.get_secret_value() if settings.github_token else None
        return cls(
            client,
            token,
            api_url=settings.github_api_url,
            user_agent=settings.user_agent,
        )

    async def get(self, path: str, params: dict[str, str] | None = None) -> httpx.Response:
        return await self._send("GET", self._api(path), params=params)

    async def get_absolute(self, url: str) -> httpx.Response:
        return await self._send("GET", url)

    async def post(self, path: str, payload: dict[str, Any]) -> httpx.Response:
        return await self._send("POST", self._api(path), json=payload)

    def _api(self, path: str) -> str:
        return f"{self._api_url}/{path.lstrip('/')}"

    async def _send(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Perform a request with network error translation."""
        logger.debug("%s %s params=%s", method, url, params)
        try:
            resp = await self._client.request(
                method, url, headers=self._headers, params=params, json=json
            )
        except httpx.HTTPError as exc:
            raise TransportError(f"Network error on {method} {url}: {exc}") from exc

        logger.debug("%s %s -> HTTP %d", method, url, resp.status_code)
        return resp
