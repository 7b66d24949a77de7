"""Configuration-related exceptions."""

from __future__ import annotations

from repoman.exceptions.base import RepoManError


class ConfigurationError(RepoManError, ValueError):
    """Raised when a rules document is malformed or unsupported.

    Always fatal to the run and never retried.
    """
