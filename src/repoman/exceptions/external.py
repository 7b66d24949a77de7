"""Failures reported by external collaborators (repository clients, resolvers)."""

from __future__ import annotations

from repoman.exceptions.base import RepoManError


class ExternalFailure(RepoManError):
    """Raised when a collaborator call fails (network, authorization, not found)."""

    def __init__(self, message: str, *, operation: str = "") -> None:
        super().__init__(message)
        self.operation = operation
