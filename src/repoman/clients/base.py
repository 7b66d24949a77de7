"""Capability interfaces the engine's checks and actions call through."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from repoman.model import CommentSnapshot, IssueSnapshot


class RepositoryClient(Protocol):
    """Issue and pull-request operations on a single hosting service.

    Implementations raise :class:`repoman.exceptions.ExternalFailure` on
    network, authorization, or not-found failures.
    """

    def get_issue(self, repository: str, number: int) -> IssueSnapshot: ...

    def get_pull_request(self, repository: str, number: int) -> IssueSnapshot: ...

    def list_labels(self, repository: str, number: int) -> list[str]: ...

    def list_comments(self, repository: str, number: int) -> list[CommentSnapshot]: ...

    def add_labels(self, repository: str, number: int, labels: Sequence[str]) -> None: ...

    def remove_labels(self, repository: str, number: int, labels: Sequence[str]) -> None: ...

    def add_assignees(self, repository: str, number: int, logins: Sequence[str]) -> None: ...

    def remove_assignees(self, repository: str, number: int, logins: Sequence[str]) -> None: ...

    def post_comment(self, repository: str, number: int, body: str) -> None: ...


class IdentityResolver(Protocol):
    """Maps a hosting-service login to an organizational identity."""

    def resolve_email(self, login: str) -> str | None:
        """Return the organizational email for *login*, or None when not an employee."""
        ...
