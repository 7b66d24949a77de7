"""Shared exception hierarchy for RepoMan."""

from __future__ import annotations

from .base import RepoManError
from .config import ConfigurationError
from .events import PayloadError, UnsupportedEventError
from .external import ExternalFailure

__all__ = [
    "ConfigurationError",
    "ExternalFailure",
    "PayloadError",
    "RepoManError",
    "UnsupportedEventError",
]
