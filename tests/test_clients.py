"""Tests for the in-memory repository client and identity resolver."""

from __future__ import annotations

import pytest

from repoman.clients import InMemoryRepositoryClient, StaticIdentityResolver
from repoman.exceptions import ExternalFailure
from repoman.model import IssueSnapshot

REPOSITORY = "contoso/docs"


@pytest.fixture
def client() -> InMemoryRepositoryClient:
    client = InMemoryRepositoryClient()
    client.seed(REPOSITORY, IssueSnapshot(number=1, author="alice", labels=("Bug",)))
    client.seed(REPOSITORY, IssueSnapshot(number=2, author="bob", is_pull_request=True))
    return client


def test_reads(client: InMemoryRepositoryClient) -> None:
    assert client.get_issue(REPOSITORY, 1).author == "alice"
    assert client.get_pull_request(REPOSITORY, 2).author == "bob"
    assert client.list_labels(REPOSITORY, 1) == ["Bug"]
    assert client.list_comments(REPOSITORY, 1) == []
    assert client.executed_writes == []


def test_get_pull_request_on_issue_fails(client: InMemoryRepositoryClient) -> None:
    with pytest.raises(ExternalFailure, match="not a pull request"):
        client.get_pull_request(REPOSITORY, 1)


def test_unknown_item_fails(client: InMemoryRepositoryClient) -> None:
    with pytest.raises(ExternalFailure) as excinfo:
        client.get_issue(REPOSITORY, 99)

    assert excinfo.value.operation == "lookup"


def test_label_writes_are_case_insensitive(client: InMemoryRepositoryClient) -> None:
    client.add_labels(REPOSITORY, 1, ["bug", "docs"])
    client.remove_labels(REPOSITORY, 1, ["BUG"])

    assert client.get_issue(REPOSITORY, 1).labels == ("docs",)
    assert [write.as_dict() for write in client.executed_writes] == [
        {"operation": "add_labels", "repository": REPOSITORY, "number": 1, "payload": ["bug", "docs"]},
        {"operation": "remove_labels", "repository": REPOSITORY, "number": 1, "payload": ["BUG"]},
    ]


def test_assignee_writes(client: InMemoryRepositoryClient) -> None:
    client.add_assignees(REPOSITORY, 1, ["carol", "alice"])
    client.add_assignees(REPOSITORY, 1, ["carol"])
    client.remove_assignees(REPOSITORY, 1, ["alice"])

    assert client.get_issue(REPOSITORY, 1).assignees == ("carol",)
    assert len(client.writes_for("add_assignees")) == 2


def test_post_comment_is_listed(client: InMemoryRepositoryClient) -> None:
    client.post_comment(REPOSITORY, 1, "hello")

    comments = client.list_comments(REPOSITORY, 1)
    assert [comment.body for comment in comments] == ["hello"]


def test_simulated_failure_records_nothing() -> None:
    client = InMemoryRepositoryClient(failing_operations={"add_labels"})
    client.seed(REPOSITORY, IssueSnapshot(number=1))

    with pytest.raises(ExternalFailure, match="Simulated failure") as excinfo:
        client.add_labels(REPOSITORY, 1, ["bug"])

    assert excinfo.value.operation == "add_labels"
    assert client.executed_writes == []


def test_identity_resolver_is_case_insensitive() -> None:
    resolver = StaticIdentityResolver({"Alice": "alice@contoso.com"})

    assert resolver.resolve_email("alice") == "alice@contoso.com"
    assert resolver.resolve_email("@ALICE") == "alice@contoso.com"
    assert resolver.resolve_email("mallory") is None
