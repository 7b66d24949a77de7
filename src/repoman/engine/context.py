"""Mutable per-delivery run state threaded through every check and action."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from repoman.clients.base import IdentityResolver, RepositoryClient
from repoman.config.model import RuleDocument
from repoman.model import CommentSnapshot, IssueSnapshot

logger = logging.getLogger(__name__)


@dataclass
class PooledOperations:
    """Side effects deferred until the rule sequence completes.

    Entries are keyed by their casefolded name because GitHub label names and
    logins are case-insensitive; the first spelling seen is the one flushed.
    A label change overrides any pending opposite change for the same label,
    so the last writer wins and the add and remove sets never overlap.
    """

    _labels_add: dict[str, str] = field(default_factory=dict)
    _labels_remove: dict[str, str] = field(default_factory=dict)
    _assignees_add: dict[str, str] = field(default_factory=dict)

    @property
    def labels_add(self) -> set[str]:
        return set(self._labels_add.values())

    @property
    def labels_remove(self) -> set[str]:
        return set(self._labels_remove.values())

    @property
    def assignees_add(self) -> set[str]:
        return set(self._assignees_add.values())

    def add_label(self, name: str) -> None:
        key = name.casefold()
        self._labels_remove.pop(key, None)
        self._labels_add.setdefault(key, name)

    def remove_label(self, name: str) -> None:
        key = name.casefold()
        self._labels_add.pop(key, None)
        self._labels_remove.setdefault(key, name)

    def add_assignee(self, login: str) -> None:
        self._assignees_add.setdefault(login.casefold(), login)

    @property
    def is_empty(self) -> bool:
        return not (self._labels_add or self._labels_remove or self._assignees_add)

    def clear(self) -> None:
        self._labels_add.clear()
        self._labels_remove.clear()
        self._assignees_add.clear()


@dataclass
class RunContext:
    """State for one webhook delivery; created per delivery and never shared."""

    repository: str
    event_type: str
    event_action: str
    issue: IssueSnapshot
    document: RuleDocument
    client: RepositoryClient
    identity: IdentityResolver
    body: str = ""
    comment: CommentSnapshot | None = None
    payload: Mapping[str, Any] = field(default_factory=dict)
    comment_metadata: dict[str, str] = field(default_factory=dict)
    operations: PooledOperations = field(default_factory=PooledOperations)
    remapped: bool = False

    @property
    def number(self) -> int:
        return self.issue.number

    @property
    def author(self) -> str:
        return self.issue.author

    def refresh_issue(self) -> None:
        """Re-fetch the issue or pull request after an immediate write."""
        if self.issue.is_pull_request:
            self.issue = self.client.get_pull_request(self.repository, self.number)
        else:
            self.issue = self.client.get_issue(self.repository, self.number)
        logger.debug("Refreshed %s#%d", self.repository, self.number)
