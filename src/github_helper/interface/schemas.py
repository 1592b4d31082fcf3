"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, TypeAdapter, field_validator

from github_helper.domain.entities import ResultEnvelope

_PROJECTION = TypeAdapter(dict[str, Any])


class CommandRequest(BaseModel):
    """Request body for ``POST /commands``."""

    command: str

    @field_validator("command")
    @classmethod
    def _must_not_be_blank(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            msg = "command must not be empty."
            raise ValueError(msg)
        return stripped


class EnvelopeResponse(BaseModel):
    """Result of a dispatched command; ``payload`` is omitted when absent."""

    status: str
    message: str
    payload: Any = None


class CommandListResponse(BaseModel):
    commands: list[str]


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str


def envelope_to_json(envelope: ResultEnvelope[Any]) -> dict[str, Any]:
    """JSON-ready projection of *envelope* (records dumped to plain dicts)."""
    return _PROJECTION.dump_python(envelope.to_dict(), mode="json")
