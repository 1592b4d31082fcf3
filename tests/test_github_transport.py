from __future__ import annotations

import httpx
import pytest
from pydantic import SecretStr

from conftest import API_URL, FakeGitHub
from github_helper.domain.exceptions import TransportError
from github_helper.infrastructure.config import Settings
from github_helper.infrastructure.github_transport import GitHubTransport


@pytest.mark.asyncio
async def test_requests_carry_auth_and_user_agent(github: FakeGitHub, transport):
    github.add("GET", "/user", json={"login": "me"})

    resp = await transport.get("/user")

    assert resp.status_code == 200
    sent = github.requests[0]
    assert str(sent.url) == f"{API_URL}/user"
    assert sent.headers["Authorization"] == "Bearer t0ken"
    assert sent.headers["User-Agent"] == "github-helper/1.0"
    assert sent.headers["Accept"] == "application/vnd.github.v3+json"


@pytest.mark.asyncio
async def test_relative_path_without_leading_slash(github: FakeGitHub, transport):
    await transport.get("repos/o/r/branches")
    assert github.requests[0].url.path == "/repos/o/r/branches"


@pytest.mark.asyncio
async def test_no_token_means_no_authorization_header(github: FakeGitHub):
    async with httpx.AsyncClient(transport=httpx.MockTransport(github.handler)) as client:
        await GitHubTransport(client, api_url=API_URL).get("/user")
    assert "Authorization" not in github.requests[0].headers


@pytest.mark.asyncio
async def test_error_statuses_are_returned_not_raised(github: FakeGitHub, transport):
    github.add("GET", "/user", 500, text="boom")
    resp = await transport.get("/user")
    assert resp.status_code == 500


@pytest.mark.asyncio
async def test_network_failure_becomes_transport_error():
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(refuse)) as client:
        with pytest.raises(TransportError, match="connection refused"):
            await GitHubTransport(client, api_url=API_URL).get("/user")


@pytest.mark.asyncio
async def test_from_settings(github: FakeGitHub):
    settings = Settings(
        github_token=SecretStr("s3cret"),
        github_api_url="https://ghe.example.com/api/v3/",
        user_agent="custom/2.0",
    )
    async with httpx.AsyncClient(transport=httpx.MockTransport(github.handler)) as client:
        await GitHubTransport.from_settings(client, settings).get("/user")

    sent = github.requests[0]
    assert str(sent.url) == "https://ghe.example.com/api/v3/user"
    assert sent.headers["Authorization"] == "Bearer s3cret"
    assert sent.headers["User-Agent"] == "custom/2.0"
