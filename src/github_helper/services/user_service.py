"""User lookups: the authenticated user and arbitrary users by login."""

from __future__ import annotations

import logging

from github_helper.domain import messages
from github_helper.domain.entities import CurrentUserCache, OperationStatus, ResultEnvelope
from github_helper.domain.ports.transport import Transport
from github_helper.domain.records import BasicUser, FullUser
from github_helper.services.guards import empty_input, is_blank, segment
from github_helper.services.response_classifier import classify_response

logger = logging.getLogger(__name__)

_CURRENT_USER = "/user"
_USER = "/users/{username}"


class UserService:
    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    async def get_current_user(
        self, cache: CurrentUserCache | None = None
    ) -> ResultEnvelope[FullUser]:
        """GET /user → FullUser.

        With a *cache*, a previously fetched user is returned without a
        request (tagged with the "already loaded" message), and a successful
        fetch fills the cache.
        """
        if cache is not None and cache.user is not None:
            logger.debug("Current user %s served from cache", cache.user.login)
            return ResultEnvelope(
                OperationStatus.SUCCESS, messages.DATA_ALREADY_LOADED, cache.user
            )

        resp = await self._transport.get(_CURRENT_USER)
        envelope = await classify_response(resp, FullUser, messages.OBJECT_NOT_FOUND)
        if cache is not None and envelope.payload is not None:
            cache.user = envelope.payload
        return envelope

    async def get_user(self, username: str | None) -> ResultEnvelope[FullUser]:
        """GET /users/{username} → FullUser."""
        if is_blank(username):
            return empty_input()
        resp = await self._transport.get(_USER.format(username=segment(username)))
        return await classify_response(
            resp, FullUser, messages.USER_NOT_FOUND.format(username=username)
        )

    async def get_user_for(self, user: BasicUser | None) -> ResultEnvelope[FullUser]:
        """Expand a BasicUser reference into the full user record."""
        if user is None:
            return empty_input()
        return await self.get_user(user.login)
