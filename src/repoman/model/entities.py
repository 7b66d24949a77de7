"""Typed snapshots of GitHub items and engine results."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from repoman.types.common import OutcomeStatus


@dataclass(frozen=True)
class IssueSnapshot:
    """Point-in-time view of an issue or pull request."""

    number: int
    title: str = ""
    body: str = ""
    author: str = ""
    state: str = "open"
    labels: tuple[str, ...] = ()
    assignees: tuple[str, ...] = ()
    is_pull_request: bool = False
    is_draft: bool = False

    def has_label(self, name: str) -> bool:
        """Return True when the item carries *name* (GitHub label names are case-insensitive)."""
        wanted = name.casefold()
        return any(label.casefold() == wanted for label in self.labels)

    def with_labels(self, labels: tuple[str, ...]) -> IssueSnapshot:
        return replace(self, labels=labels)


@dataclass(frozen=True)
class CommentSnapshot:
    """A single issue or pull-request comment."""

    id: int
    author: str = ""
    body: str = ""


@dataclass(frozen=True)
class FlushResult:
    """Consolidated side effects issued by one pool flush."""

    labels_added: tuple[str, ...] = ()
    labels_removed: tuple[str, ...] = ()
    assignees_added: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.labels_added or self.labels_removed or self.assignees_added)


@dataclass(frozen=True)
class RunOutcome:
    """Result of handling one delivery."""

    status: OutcomeStatus
    event_type: str
    event_action: str
    remapped_from: str | None = None
    gates_passed: bool = True
    flushed: FlushResult = field(default_factory=FlushResult)
