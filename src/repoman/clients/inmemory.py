"""In-memory collaborators for deterministic tests and dry runs."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, replace
from typing import Any

from repoman.exceptions import ExternalFailure
from repoman.model import CommentSnapshot, IssueSnapshot


@dataclass(frozen=True)
class WriteRecord:
    operation: str
    repository: str
    number: int
    payload: tuple[str, ...]

    def as_dict(self) -> dict[str, Any]:
        return {
            "operation": self.operation,
            "repository": self.repository,
            "number": self.number,
            "payload": list(self.payload),
        }


class InMemoryRepositoryClient:
    """Repository client backed by dictionaries; records every write."""

    def __init__(self, failing_operations: Iterable[str] = ()) -> None:
        self.items: dict[tuple[str, int], IssueSnapshot] = {}
        self.comments: dict[tuple[str, int], list[CommentSnapshot]] = {}
        self.executed_writes: list[WriteRecord] = []
        self.failing_operations = frozenset(failing_operations)
        self._next_comment_id = 1

    def seed(self, repository: str, item: IssueSnapshot) -> None:
        self.items[(repository, item.number)] = item

    def get_issue(self, repository: str, number: int) -> IssueSnapshot:
        self._guard("get_issue")
        return self._require(repository, number)

    def get_pull_request(self, repository: str, number: int) -> IssueSnapshot:
        self._guard("get_pull_request")
        item = self._require(repository, number)
        if not item.is_pull_request:
            raise ExternalFailure(f"{repository}#{number} is not a pull request", operation="get_pull_request")
        return item

    def list_labels(self, repository: str, number: int) -> list[str]:
        self._guard("list_labels")
        return list(self._require(repository, number).labels)

    def list_comments(self, repository: str, number: int) -> list[CommentSnapshot]:
        self._guard("list_comments")
        self._require(repository, number)
        return list(self.comments.get((repository, number), []))

    def add_labels(self, repository: str, number: int, labels: Sequence[str]) -> None:
        self._record("add_labels", repository, number, labels)
        item = self._require(repository, number)
        merged = list(item.labels)
        for label in labels:
            if not item.has_label(label):
                merged.append(label)
        self.items[(repository, number)] = item.with_labels(tuple(merged))

    def remove_labels(self, repository: str, number: int, labels: Sequence[str]) -> None:
        self._record("remove_labels", repository, number, labels)
        item = self._require(repository, number)
        dropped = {label.casefold() for label in labels}
        kept = tuple(label for label in item.labels if label.casefold() not in dropped)
        self.items[(repository, number)] = item.with_labels(kept)

    def add_assignees(self, repository: str, number: int, logins: Sequence[str]) -> None:
        self._record("add_assignees", repository, number, logins)
        item = self._require(repository, number)
        merged = tuple(dict.fromkeys((*item.assignees, *logins)))
        self.items[(repository, number)] = replace(item, assignees=merged)

    def remove_assignees(self, repository: str, number: int, logins: Sequence[str]) -> None:
        self._record("remove_assignees", repository, number, logins)
        item = self._require(repository, number)
        dropped = set(logins)
        kept = tuple(login for login in item.assignees if login not in dropped)
        self.items[(repository, number)] = replace(item, assignees=kept)

    def post_comment(self, repository: str, number: int, body: str) -> None:
        self._record("post_comment", repository, number, (body,))
        self._require(repository, number)
        comment = CommentSnapshot(id=self._next_comment_id, author="repoman", body=body)
        self._next_comment_id += 1
        self.comments.setdefault((repository, number), []).append(comment)

    def writes_for(self, operation: str) -> list[WriteRecord]:
        return [write for write in self.executed_writes if write.operation == operation]

    def _record(self, operation: str, repository: str, number: int, payload: Sequence[str]) -> None:
        self._guard(operation)
        self.executed_writes.append(
            WriteRecord(operation=operation, repository=repository, number=number, payload=tuple(payload))
        )

    def _guard(self, operation: str) -> None:
        if operation in self.failing_operations:
            raise ExternalFailure(f"Simulated failure for {operation}", operation=operation)

    def _require(self, repository: str, number: int) -> IssueSnapshot:
        item = self.items.get((repository, number))
        if item is None:
            raise ExternalFailure(f"{repository}#{number} not found", operation="lookup")
        return item


class StaticIdentityResolver:
    """Identity resolver backed by a fixed login -> email table."""

    def __init__(self, identities: Mapping[str, str] | None = None) -> None:
        self._identities = {login.casefold(): email for login, email in (identities or {}).items()}

    def resolve_email(self, login: str) -> str | None:
        return self._identities.get(login.lstrip("@").casefold())
