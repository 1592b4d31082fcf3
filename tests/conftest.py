"""Shared fixtures: a fake GitHub API served through ``httpx.MockTransport``."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

import httpx
import pytest
import pytest_asyncio

from github_helper.infrastructure.github_transport import GitHubTransport

API_URL = "https://api.github.test"


class FakeGitHub:
    """Records every request and answers from a ``(method, path)`` route table."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], tuple[int, Any, str | None]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        status: int = 200,
        *,
        json: Any = None,
        text: str | None = None,
    ) -> None:
        self.routes[(method, path)] = (status, json, text)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": "Not Found"})
        status, json_body, text = route
        if json_body is not None:
            return httpx.Response(status, json=json_body)
        return httpx.Response(status, text=text or "")


@pytest.fixture
def github() -> FakeGitHub:
    return FakeGitHub()


@pytest_asyncio.fixture
async def transport(github: FakeGitHub) -> AsyncIterator[GitHubTransport]:
    async with httpx.AsyncClient(transport=httpx.MockTransport(github.handler)) as client:
        yield GitHubTransport(client, token="t0ken", api_url=API_URL)


# ── Sample payloads ─────────────────────────────────────────────────────────


def user_json(login: str = "testuser", **extra: Any) -> dict[str, Any]:
    return {"login": login, "url": f"{API_URL}/users/{login}", "id": 1, **extra}


def repo_json(owner: str = "testuser", name: str = "testrepo", **extra: Any) -> dict[str, Any]:
    return {
        "owner": {"login": owner, "url": f"{API_URL}/users/{owner}"},
        "name": name,
        "full_name": f"{owner}/{name}",
        "description": "a test repository",
        "private": False,
        **extra,
    }


def branch_json(name: str = "main", sha: str = "abc123") -> dict[str, Any]:
    return {
        "name": name,
        "commit": {"sha": sha, "url": f"{API_URL}/repos/o/r/commits/{sha}"},
        "protected": False,
    }


def commit_json(sha: str = "abc123", message: str = "Initial commit") -> dict[str, Any]:
    return {
        "sha": sha,
        "url": f"{API_URL}/repos/o/r/commits/{sha}",
        "commit": {
            "message": message,
            "author": {"name": "Test", "email": "t@example.com", "date": "2024-01-01T00:00:00Z"},
        },
        "author": {"login": "testuser"},
        "parents": [],
    }
