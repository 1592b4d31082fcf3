"""Commit listing and single-commit lookups."""

from __future__ import annotations

from github_helper.domain import messages
from github_helper.domain.entities import ResultEnvelope
from github_helper.domain.ports.transport import Transport
from github_helper.domain.records import BasicCommit, BasicRepository, Branch, Commit
from github_helper.services.guards import empty_input, is_blank, segment
from github_helper.services.response_classifier import classify_response

_COMMITS = "/repos/{owner}/{repo}/commits"
_COMMIT = "/repos/{owner}/{repo}/commits/{sha}"


class CommitService:
    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    async def get_repository_commits(
        self, owner: str | None, repo: str | None
    ) -> ResultEnvelope[list[Commit]]:
        """GET /repos/{owner}/{repo}/commits → [Commit] (default branch)."""
        if is_blank(owner, repo):
            return empty_input()
        resp = await self._transport.get(
            _COMMITS.format(owner=segment(owner), repo=segment(repo))
        )
        return await classify_response(
            resp,
            list[Commit],
            messages.USER_OR_REPOSITORY_NOT_FOUND.format(username=owner, repository=repo),
        )

    async def get_repository_commits_for(
        self, repository: BasicRepository | None
    ) -> ResultEnvelope[list[Commit]]:
        if repository is None:
            return empty_input()
        return await self.get_repository_commits(repository.owner.login, repository.name)

    async def get_branch_commits(
        self, owner: str | None, repo: str | None, branch: str | None
    ) -> ResultEnvelope[list[Commit]]:
        """GET /repos/{owner}/{repo}/commits?sha={branch} → [Commit]."""
        if is_blank(owner, repo, branch):
            return empty_input()
        resp = await self._transport.get(
            _COMMITS.format(owner=segment(owner), repo=segment(repo)),
            params={"sha": branch},
        )
        return await classify_response(
            resp,
            list[Commit],
            messages.USER_REPOSITORY_OR_BRANCH_NOT_FOUND.format(
                username=owner, repository=repo, branch=branch
            ),
        )

    async def get_branch_commits_for(
        self, repository: BasicRepository | None, branch: Branch | None
    ) -> ResultEnvelope[list[Commit]]:
        if repository is None or branch is None:
            return empty_input()
        return await self.get_branch_commits(
            repository.owner.login, repository.name, branch.name
        )

    async def get_commit(
        self, owner: str | None, repo: str | None, sha: str | None
    ) -> ResultEnvelope[Commit]:
        """GET /repos/{owner}/{repo}/commits/{sha} → Commit."""
        if is_blank(owner, repo, sha):
            return empty_input()
        resp = await self._transport.get(
            _COMMIT.format(owner=segment(owner), repo=segment(repo), sha=segment(sha))
        )
        return await classify_response(resp, Commit, messages.OBJECT_NOT_FOUND)

    async def get_commit_for(self, commit: BasicCommit | None) -> ResultEnvelope[Commit]:
        """Follow a BasicCommit's API ``url`` to the full commit."""
        if commit is None or is_blank(commit.url):
            return empty_input()
        resp = await self._transport.get_absolute(commit.url)
        return await classify_response(resp, Commit, messages.OBJECT_NOT_FOUND)
