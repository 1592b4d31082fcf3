"""Command-line parsing: turn a free-form line into a CommandInvocation.

Grammar::

    command := resource_kind SP action (SP flag (SP value)?)*
    flag    := ('--' | '-') name

Values are single whitespace-delimited tokens; quoting is not supported.  A
flag with no value maps to ``""`` so callers can still tell "given without a
value" from "not given".  When a flag repeats, the last occurrence wins.
"""

from __future__ import annotations

from github_helper.domain.entities import CommandInvocation
from github_helper.domain.exceptions import CommandParseError


def is_flag(token: str) -> bool:
    """Return True for ``-x`` / ``--name`` tokens.

    One or two leading dashes, followed by a non-empty name containing no
    further dashes.
    """
    if token.startswith("--"):
        name = token[2:]
    elif token.startswith("-"):
        name = token[1:]
    else:
        return False
    return bool(name) and "-" not in name


def parse(command_line: str) -> CommandInvocation:
    """Parse *command_line* into resource kind, action and flag parameters."""
    tokens = command_line.split()
    if len(tokens) < 2:
        raise CommandParseError(
            f"Expected '<resource> <action> [--flag value ...]', got {command_line!r}."
        )

    parameters: dict[str, str] = {}
    for i in range(2, len(tokens)):
        token = tokens[i]
        if not is_flag(token):
            continue
        key = token.lstrip("-")
        has_value = i + 1 < len(tokens) and not is_flag(tokens[i + 1])
        # Re-insert so iteration order follows the last occurrence of each key.
        parameters.pop(key, None)
        parameters[key] = tokens[i + 1] if has_value else ""

    return CommandInvocation(
        resource_kind=tokens[0],
        action=tokens[1],
        parameters=parameters,
    )


def format_invocation(invocation: CommandInvocation) -> str:
    """Serialize *invocation* back into the command grammar.

    ``parse(format_invocation(inv)) == inv`` for any invocation whose values
    are single tokens that are not themselves flags.
    """
    parts = [invocation.resource_kind, invocation.action]
    for key, value in invocation.parameters.items():
        parts.append(f"--{key}")
        if value:
            parts.append(value)
    return " ".join(parts)
