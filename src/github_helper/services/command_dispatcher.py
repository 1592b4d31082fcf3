"""Command dispatcher: route parsed command lines to the data services.

This is the single entry point used by both outer surfaces (console and HTTP
API).  It depends only on the :class:`Transport` port; the interface layer
injects a concrete transport at runtime.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from github_helper.domain.entities import CommandInvocation, CurrentUserCache, ResultEnvelope
from github_helper.domain.exceptions import UnknownCommandError
from github_helper.domain.ports.transport import Transport
from github_helper.domain.records import CreateRepositoryRequest
from github_helper.services.branch_service import BranchService
from github_helper.services.command_parser import parse
from github_helper.services.commit_service import CommitService
from github_helper.services.repository_service import RepositoryService
from github_helper.services.user_service import UserService

logger = logging.getLogger(__name__)

Handler = Callable[[dict[str, str]], Awaitable[ResultEnvelope[Any]]]

# Short flag → long flag
FLAG_ALIASES: dict[str, str] = {
    "n": "name",
    "d": "description",
    "o": "owner",
    "r": "repo",
    "b": "branch",
    "u": "user",
    "s": "sha",
    "p": "private",
}

_FALSY = frozenset({"false", "no", "0"})


def normalize_parameters(parameters: dict[str, str]) -> dict[str, str]:
    """Expand short flag names; later flags override earlier ones."""
    normalized: dict[str, str] = {}
    for key, value in parameters.items():
        normalized[FLAG_ALIASES.get(key, key)] = value
    return normalized


class CommandDispatcher:
    """Maps ``(resource, action)`` pairs to service calls.

    The dispatcher owns the :class:`CurrentUserCache` for its lifetime, so
    repeated ``user current`` commands hit GitHub only once.
    """

    def __init__(self, transport: Transport, cache: CurrentUserCache | None = None) -> None:
        self._users = UserService(transport)
        self._repos = RepositoryService(transport)
        self._branches = BranchService(transport)
        self._commits = CommitService(transport)
        self._cache = cache if cache is not None else CurrentUserCache()

        self._handlers: dict[tuple[str, str], tuple[Handler, str]] = {
            ("user", "current"): (self._user_current, "user current"),
            ("user", "show"): (self._user_show, "user show --user <login>"),
            ("repo", "list"): (self._repo_list, "repo list [--user <login>]"),
            ("repo", "show"): (self._repo_show, "repo show --owner <login> --repo <name>"),
            ("repo", "create"): (
                self._repo_create,
                "repo create --name <name> [--description <text>] [--private]",
            ),
            ("branch", "list"): (self._branch_list, "branch list --owner <login> --repo <name>"),
            ("commit", "list"): (
                self._commit_list,
                "commit list --owner <login> --repo <name> [--branch <name>]",
            ),
            ("commit", "show"): (
                self._commit_show,
                "commit show --owner <login> --repo <name> --sha <sha>",
            ),
        }

    @property
    def cache(self) -> CurrentUserCache:
        return self._cache

    def usage(self) -> list[str]:
        """One usage line per supported command."""
        return [usage for _, usage in self._handlers.values()]

    async def run(self, command_line: str) -> ResultEnvelope[Any]:
        """Parse *command_line* and dispatch it."""
        return await self.dispatch(parse(command_line))

    async def dispatch(self, invocation: CommandInvocation) -> ResultEnvelope[Any]:
        key = (invocation.resource_kind.lower(), invocation.action.lower())
        entry = self._handlers.get(key)
        if entry is None:
            raise UnknownCommandError(
                f"Unknown command '{invocation.resource_kind} {invocation.action}'."
            )
        handler, _ = entry
        params = normalize_parameters(invocation.parameters)
        logger.debug("Dispatching %s %s with %s", *key, params)

        envelope = await handler(params)
        if not envelope.ok:
            logger.info("%s %s → %s: %s", *key, envelope.status.value, envelope.message)
        return envelope

    # ── Handlers ────────────────────────────────────────────────────────────

    async def _user_current(self, params: dict[str, str]) -> ResultEnvelope[Any]:
        return await self._users.get_current_user(self._cache)

    async def _user_show(self, params: dict[str, str]) -> ResultEnvelope[Any]:
        return await self._users.get_user(params.get("user"))

    async def _repo_list(self, params: dict[str, str]) -> ResultEnvelope[Any]:
        if "user" in params:
            return await self._repos.get_user_repositories(params["user"])
        return await self._repos.get_current_user_repositories()

    async def _repo_show(self, params: dict[str, str]) -> ResultEnvelope[Any]:
        return await self._repos.get_repository(params.get("owner"), params.get("repo"))

    async def _repo_create(self, params: dict[str, str]) -> ResultEnvelope[Any]:
        private = "private" in params and params["private"].lower() not in _FALSY
        request = CreateRepositoryRequest(
            name=params.get("name", ""),
            description=params.get("description", ""),
            private=private,
        )
        return await self._repos.create_repository(request)

    async def _branch_list(self, params: dict[str, str]) -> ResultEnvelope[Any]:
        return await self._branches.get_branches(params.get("owner"), params.get("repo"))

    async def _commit_list(self, params: dict[str, str]) -> ResultEnvelope[Any]:
        if "branch" in params:
            return await self._commits.get_branch_commits(
                params.get("owner"), params.get("repo"), params["branch"]
            )
        return await self._commits.get_repository_commits(
            params.get("owner"), params.get("repo")
        )

    async def _commit_show(self, params: dict[str, str]) -> ResultEnvelope[Any]:
        return await self._commits.get_commit(
            params.get("owner"), params.get("repo"), params.get("sha")
        )
