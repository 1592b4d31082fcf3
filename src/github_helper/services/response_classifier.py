"""Response classification: turn an HTTP status and body into a ResultEnvelope.

Every remote call in the helper goes through :func:`classify`, so all of its
outcomes (including undecodable bodies) come back as values rather than
exceptions.  Decoding is driven by the caller's requested *shape*, which may
be any type pydantic can validate: a single record (``FullUser``) or a
sequence of records (``list[Branch]``) take the same path.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from functools import lru_cache
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from github_helper.domain import messages
from github_helper.domain.entities import OperationStatus, ResultEnvelope

logger = logging.getLogger(__name__)

T = TypeVar("T")

BodyReader = Callable[[], Awaitable[str]]


@lru_cache(maxsize=64)
def _adapter(shape: Any) -> TypeAdapter[Any]:
    return TypeAdapter(shape)


async def classify(
    status_code: int,
    read_body: BodyReader,
    not_found_message: str,
    shape: type[T],
) -> ResultEnvelope[T]:
    """Classify a finished HTTP exchange.

    Args:
        status_code: HTTP status of the response.
        read_body: Coroutine factory returning the body text.  Only awaited
            for ``200`` responses.
        not_found_message: Message used verbatim for ``404``.
        shape: Type to decode a ``200`` body into.
    """
    if status_code == 401:
        return ResultEnvelope(OperationStatus.UNAUTHORIZED, messages.UNAUTHORIZED)

    if status_code == 404:
        return ResultEnvelope(OperationStatus.NOT_FOUND, not_found_message)

    if status_code == 201:
        return ResultEnvelope(OperationStatus.SUCCESS, messages.SUCCESS)

    if status_code == 200:
        body = await read_body()
        try:
            payload = _adapter(shape).validate_json(body)
        except ValidationError as exc:
            logger.info("Undecodable %s payload: %d error(s)", shape, exc.error_count())
            return ResultEnvelope(
                OperationStatus.MALFORMED_PAYLOAD, messages.invalid_json(body)
            )
        return ResultEnvelope(OperationStatus.SUCCESS, messages.SUCCESS, payload)

    logger.info("Unhandled HTTP status %d", status_code)
    return ResultEnvelope(OperationStatus.UNKNOWN_ERROR, messages.UNKNOWN_ERROR)


async def classify_response(
    response: httpx.Response,
    shape: type[T],
    not_found_message: str = messages.OBJECT_NOT_FOUND,
) -> ResultEnvelope[T]:
    """Classify an ``httpx.Response``, reading its body lazily."""

    async def read_body() -> str:
        await response.aread()
        return response.text

    return await classify(response.status_code, read_body, not_found_message, shape)
