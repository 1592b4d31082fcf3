"""Domain exception hierarchy.

Remote call outcomes are never raised: they travel as
:class:`~github_helper.domain.entities.ResultEnvelope` values.  The
exceptions below cover the surrounding layers (command parsing, dispatch,
network transport) and are translated by the interface layer.
"""

from __future__ import annotations


class GitHubHelperError(Exception):
    """Base exception for the entire application."""


# ── Command front end ───────────────────────────────────────────────────────


class CommandParseError(GitHubHelperError):
    """The command line does not contain a resource kind and an action."""


class UnknownCommandError(GitHubHelperError):
    """No handler is registered for the requested resource / action pair."""


# ── Transport ───────────────────────────────────────────────────────────────


class TransportError(GitHubHelperError):
    """The HTTP request could not be completed (DNS, connect, timeout, ...)."""
