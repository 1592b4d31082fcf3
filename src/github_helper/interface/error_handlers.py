"""Global exception handlers — translate helper errors to HTTP responses.

GitHub call outcomes are already envelopes and never reach these handlers.
What does is a bad command line, an unknown command or a transport failure;
each maps to a status code and the ``{"status": "error", "message": "..."}``
envelope.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from github_helper.domain.exceptions import (
    CommandParseError,
    GitHubHelperError,
    TransportError,
    UnknownCommandError,
)
from github_helper.interface.schemas import ErrorResponse

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[GitHubHelperError], int] = {
    CommandParseError: 422,
    UnknownCommandError: 404,
    TransportError: 502,
}


def _error_json(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
    )


def status_for(exc: GitHubHelperError) -> int:
    """HTTP status for a helper error; unmapped subclasses are server errors."""
    for exc_type in type(exc).__mro__:
        if exc_type in _STATUS_BY_ERROR:
            return _STATUS_BY_ERROR[exc_type]
    return 500


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    @app.exception_handler(GitHubHelperError)
    async def helper_error_handler(request: Request, exc: GitHubHelperError) -> JSONResponse:
        code = status_for(exc)
        logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc)
        return _error_json(code, str(exc))

    @app.exception_handler(RequestValidationError)
    async def validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        problems = []
        for err in exc.errors():
            loc = ".".join(str(p) for p in err.get("loc", []))
            problems.append(f"{loc}: {err.get('msg', 'validation error')}")
        return _error_json(422, "; ".join(problems))

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception")
        return _error_json(500, "An unexpected error occurred. Please try again later.")
