"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from github_helper.domain.records import FullUser

T = TypeVar("T")


class OperationStatus(str, Enum):
    """Outcome of a single GitHub API call.  Exactly one is always set."""

    SUCCESS = "Success"
    UNAUTHORIZED = "Unauthorized"
    NOT_FOUND = "NotFound"
    MALFORMED_PAYLOAD = "MalformedPayload"
    UNKNOWN_ERROR = "UnknownError"
    EMPTY_INPUT = "EmptyInput"


@dataclass(frozen=True, slots=True)
class ResultEnvelope(Generic[T]):
    """Uniform result of every API call: status, message and optional payload.

    ``payload`` is set only for ``SUCCESS`` results of calls that return data.
    """

    status: OperationStatus
    message: str
    payload: T | None = None

    @property
    def ok(self) -> bool:
        return self.status is OperationStatus.SUCCESS

    def to_dict(self) -> dict[str, Any]:
        """Project to ``{"status", "message", "payload"}``; absent payload is omitted."""
        data: dict[str, Any] = {"status": self.status.value, "message": self.message}
        if self.payload is not None:
            data["payload"] = self.payload
        return data


@dataclass(frozen=True, slots=True)
class CommandInvocation:
    """A parsed command line: what to operate on, what to do, and named flags."""

    resource_kind: str
    action: str
    parameters: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class CurrentUserCache:
    """Caller-owned slot for the authenticated user, filled by the first successful fetch."""

    user: FullUser | None = None

    def clear(self) -> None:
        self.user = None
