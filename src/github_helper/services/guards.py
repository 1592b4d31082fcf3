"""Argument guards shared by the data services."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from github_helper.domain import messages
from github_helper.domain.entities import OperationStatus, ResultEnvelope


def is_blank(*values: Any) -> bool:
    """True if any value is ``None`` or an empty string."""
    return any(value is None or value == "" for value in values)


def empty_input() -> ResultEnvelope[Any]:
    return ResultEnvelope(OperationStatus.EMPTY_INPUT, messages.EMPTY_INPUT)


def segment(value: str) -> str:
    """Percent-encode *value* as a single URL path segment (``/`` included)."""
    return quote(value, safe="")
