"""Delivery-related exceptions."""

from __future__ import annotations

from repoman.exceptions.base import RepoManError


class PayloadError(RepoManError, ValueError):
    """Raised when a webhook payload is missing required fields."""


class UnsupportedEventError(RepoManError):
    """Raised when a delivery carries an event type RepoMan does not handle."""
