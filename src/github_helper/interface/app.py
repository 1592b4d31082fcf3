"""FastAPI application factory.

The lifespan owns the HTTP client and the command dispatcher.  One dispatcher
(and so one current-user cache) lives for as long as the application runs and
is published on ``app.state`` for the request dependencies to pick up.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import Depends, FastAPI

from github_helper.infrastructure.config import Settings, get_settings
from github_helper.infrastructure.github_transport import GitHubTransport
from github_helper.interface.dependencies import get_dispatcher
from github_helper.interface.error_handlers import register_error_handlers
from github_helper.interface.routes import router
from github_helper.services.command_dispatcher import CommandDispatcher

logger = logging.getLogger(__name__)


def _lifespan_for(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        timeout = httpx.Timeout(settings.request_timeout)
        async with httpx.AsyncClient(timeout=timeout) as client:
            transport = GitHubTransport.from_settings(client, settings)
            app.state.dispatcher = CommandDispatcher(transport)
            logger.info(
                "Dispatcher ready for %s (%s)",
                settings.github_api_url,
                "authenticated" if settings.github_token else "anonymous",
            )
            try:
                yield
            finally:
                app.state.dispatcher.cache.clear()
                del app.state.dispatcher
                logger.info("Dispatcher released")

    return lifespan


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the command API; *settings* default to the environment."""
    settings = settings or get_settings()
    app = FastAPI(
        title="GitHub Helper",
        version="1.0.0",
        description=(
            "Runs GitHub helper command lines such as "
            "'repo show --owner psf --repo requests' and returns the "
            "result envelope: status, message and payload."
        ),
        lifespan=_lifespan_for(settings),
    )

    register_error_handlers(app)
    app.include_router(router)

    @app.get("/health", include_in_schema=False)
    async def health(
        dispatcher: CommandDispatcher = Depends(get_dispatcher),
    ) -> dict[str, str]:
        cached = dispatcher.cache.user
        return {"status": "ok", "user": cached.login if cached else ""}

    return app
