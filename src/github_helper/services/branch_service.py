"""Branch listing."""

from __future__ import annotations

from github_helper.domain import messages
from github_helper.domain.entities import ResultEnvelope
from github_helper.domain.ports.transport import Transport
from github_helper.domain.records import BasicRepository, Branch
from github_helper.services.guards import empty_input, is_blank, segment
from github_helper.services.response_classifier import classify_response

_BRANCHES = "/repos/{owner}/{repo}/branches"


class BranchService:
    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    async def get_branches(
        self, owner: str | None, repo: str | None
    ) -> ResultEnvelope[list[Branch]]:
        """GET /repos/{owner}/{repo}/branches → [Branch]."""
        if is_blank(owner, repo):
            return empty_input()
        resp = await self._transport.get(
            _BRANCHES.format(owner=segment(owner), repo=segment(repo))
        )
        return await classify_response(
            resp,
            list[Branch],
            messages.USER_OR_REPOSITORY_NOT_FOUND.format(username=owner, repository=repo),
        )

    async def get_branches_for(
        self, repository: BasicRepository | None
    ) -> ResultEnvelope[list[Branch]]:
        if repository is None:
            return empty_input()
        return await self.get_branches(repository.owner.login, repository.name)
