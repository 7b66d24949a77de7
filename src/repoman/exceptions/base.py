"""Root of the RepoMan exception hierarchy."""

from __future__ import annotations


class RepoManError(Exception):
    """Base class for all errors raised by RepoMan."""
