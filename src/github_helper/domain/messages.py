"""Human-readable envelope messages."""

from __future__ import annotations

SUCCESS = "Operation end with success."
DATA_ALREADY_LOADED = "Data already loaded from GitHub."
UNAUTHORIZED = "Invalid access token."
UNKNOWN_ERROR = "Operation ended with unknown error."
EMPTY_INPUT = "Passed data is null or empty."
INVALID_JSON = "Json object from server has invalid format"
OBJECT_NOT_FOUND = "Requested data not found."

# ── Not-found templates ─────────────────────────────────────────────────────

USER_NOT_FOUND = "User {username} not found."
USER_OR_REPOSITORY_NOT_FOUND = "User {username} or repository {repository} not found."
USER_REPOSITORY_OR_BRANCH_NOT_FOUND = (
    "User {username} or repository {repository} or branch {branch} not found."
)


def invalid_json(body: str) -> str:
    """Build the malformed-payload message with the raw body appended verbatim."""
    return f"{INVALID_JSON}: {body}"
