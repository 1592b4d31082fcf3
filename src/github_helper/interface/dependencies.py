"""FastAPI dependency injection wiring."""

from __future__ import annotations

from fastapi import Request

from github_helper.services.command_dispatcher import CommandDispatcher


def get_dispatcher(request: Request) -> CommandDispatcher:
    """Return the application's dispatcher (and its current-user cache)."""
    return request.app.state.dispatcher
