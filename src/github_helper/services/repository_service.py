"""Repository lookups and creation."""

from __future__ import annotations

import logging

from github_helper.domain import messages
from github_helper.domain.entities import ResultEnvelope
from github_helper.domain.ports.transport import Transport
from github_helper.domain.records import (
    BasicRepository,
    BasicUser,
    CreateRepositoryRequest,
    FullRepository,
)
from github_helper.services.guards import empty_input, is_blank, segment
from github_helper.services.response_classifier import classify_response

logger = logging.getLogger(__name__)

_CURRENT_USER_REPOS = "/user/repos"
_USER_REPOS = "/users/{username}/repos"
_REPO = "/repos/{owner}/{repo}"


class RepositoryService:
    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    async def create_repository(
        self, request: CreateRepositoryRequest | None
    ) -> ResultEnvelope[FullRepository]:
        """POST /user/repos.  GitHub answers ``201 Created``; no payload is kept."""
        if request is None or is_blank(request.name):
            return empty_input()
        logger.info("Creating repository %s (private=%s)", request.name, request.private)
        resp = await self._transport.post(_CURRENT_USER_REPOS, request.model_dump())
        return await classify_response(resp, FullRepository, messages.OBJECT_NOT_FOUND)

    async def get_current_user_repositories(self) -> ResultEnvelope[list[FullRepository]]:
        """GET /user/repos → [FullRepository]."""
        resp = await self._transport.get(_CURRENT_USER_REPOS)
        return await classify_response(resp, list[FullRepository], messages.OBJECT_NOT_FOUND)

    async def get_user_repositories(
        self, username: str | None
    ) -> ResultEnvelope[list[FullRepository]]:
        """GET /users/{username}/repos → [FullRepository]."""
        if is_blank(username):
            return empty_input()
        resp = await self._transport.get(_USER_REPOS.format(username=segment(username)))
        return await classify_response(
            resp,
            list[FullRepository],
            messages.USER_NOT_FOUND.format(username=username),
        )

    async def get_user_repositories_for(
        self, user: BasicUser | None
    ) -> ResultEnvelope[list[FullRepository]]:
        if user is None:
            return empty_input()
        return await self.get_user_repositories(user.login)

    async def get_repository(
        self, owner: str | None, repo: str | None
    ) -> ResultEnvelope[FullRepository]:
        """GET /repos/{owner}/{repo} → FullRepository."""
        if is_blank(owner, repo):
            return empty_input()
        resp = await self._transport.get(
            _REPO.format(owner=segment(owner), repo=segment(repo))
        )
        return await classify_response(
            resp,
            FullRepository,
            messages.USER_OR_REPOSITORY_NOT_FOUND.format(username=owner, repository=repo),
        )

    async def get_repository_for(
        self, repository: BasicRepository | None
    ) -> ResultEnvelope[FullRepository]:
        """Expand a BasicRepository reference into the full repository record."""
        if repository is None:
            return empty_input()
        return await self.get_repository(repository.owner.login, repository.name)
