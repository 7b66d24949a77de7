"""Shared type aliases for RepoMan."""

from .common import NodeKind, OutcomeStatus

__all__ = ["NodeKind", "OutcomeStatus"]
