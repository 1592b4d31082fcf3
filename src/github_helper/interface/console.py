"""Interactive console front end.

Usage::

    github-helper                                  # prompt loop
    github-helper repo show --owner psf --repo requests   # one-shot
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from collections.abc import Callable

import httpx

from github_helper.domain.exceptions import GitHubHelperError
from github_helper.infrastructure.config import get_settings
from github_helper.infrastructure.github_transport import GitHubTransport
from github_helper.interface.schemas import envelope_to_json
from github_helper.services.command_dispatcher import CommandDispatcher

logger = logging.getLogger(__name__)

PROMPT = "github> "
_EXIT_WORDS = frozenset({"exit", "quit"})


def _help_text(dispatcher: CommandDispatcher) -> str:
    lines = ["Commands:"]
    lines += [f"  {usage}" for usage in dispatcher.usage()]
    lines.append("  help | exit | quit")
    return "\n".join(lines)


async def handle_line(dispatcher: CommandDispatcher, line: str) -> tuple[bool, str]:
    """Run one command line; return ``(succeeded, text to print)``."""
    if line == "help":
        return True, _help_text(dispatcher)
    try:
        envelope = await dispatcher.run(line)
    except GitHubHelperError as exc:
        logger.debug("Command %r failed: %s", line, exc)
        return False, f"error: {exc}"
    return envelope.ok, json.dumps(envelope_to_json(envelope), indent=2)


async def repl(
    dispatcher: CommandDispatcher,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """Prompt for command lines until ``exit``/``quit`` or end of input."""
    write("Type 'help' for the list of commands.")
    while True:
        try:
            line = read_line(PROMPT).strip()
        except EOFError:
            break
        if not line:
            continue
        if line in _EXIT_WORDS:
            break
        _, output = await handle_line(dispatcher, line)
        write(output)


async def _run(argv: list[str]) -> int:
    settings = get_settings()
    timeout = httpx.Timeout(settings.request_timeout)
    async with httpx.AsyncClient(timeout=timeout) as client:
        dispatcher = CommandDispatcher(GitHubTransport.from_settings(client, settings))
        if argv:
            ok, output = await handle_line(dispatcher, " ".join(argv))
            print(output)
            return 0 if ok else 1
        await repl(dispatcher)
    return 0


def main(argv: list[str] | None = None) -> None:
    """Console entry point."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )
    args = sys.argv[1:] if argv is None else argv
    sys.exit(asyncio.run(_run(args)))


if __name__ == "__main__":
    main()
