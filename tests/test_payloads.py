"""Tests for mapping webhook payloads to run contexts."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from repoman.clients import InMemoryRepositoryClient, StaticIdentityResolver
from repoman.config import load_rules_file
from repoman.events import (
    build_run_context,
    issue_snapshot_from_payload,
    pull_request_snapshot_from_payload,
    repository_from_payload,
)
from repoman.exceptions import PayloadError, UnsupportedEventError
from repoman.io import load_json_file
from repoman.model import IssueSnapshot


def _payload(fixtures_root: Path, name: str) -> dict[str, Any]:
    payload = load_json_file(fixtures_root / "payloads" / name)
    assert isinstance(payload, dict)
    return payload


def _build(event_type: str, payload: dict[str, Any], docs_rules_path: Path, client=None):
    return build_run_context(
        event_type,
        payload,
        document=load_rules_file(docs_rules_path),
        client=client or InMemoryRepositoryClient(),
        identity=StaticIdentityResolver(),
    )


def test_issue_payload(fixtures_root: Path, docs_rules_path: Path) -> None:
    ctx = _build("issues", _payload(fixtures_root, "issue_opened.json"), docs_rules_path)

    assert ctx.repository == "contoso/docs"
    assert ctx.event_action == "opened"
    assert ctx.number == 1423
    assert ctx.author == "contributor42"
    assert ctx.body.startswith("The sample in step 3")
    assert ctx.comment is None
    assert ctx.operations.is_empty


def test_repository_from_owner_and_name(fixtures_root: Path) -> None:
    payload = _payload(fixtures_root, "issue_labeled_rerun.json")

    assert repository_from_payload(payload) == "contoso/docs"


def test_label_names_are_flattened(fixtures_root: Path) -> None:
    raw = _payload(fixtures_root, "issue_labeled_rerun.json")["issue"]

    assert issue_snapshot_from_payload(raw).labels == ("needs-triage", "rerun-action-size")


def test_pull_request_payload(fixtures_root: Path, docs_rules_path: Path) -> None:
    ctx = _build("pull_request", _payload(fixtures_root, "pull_request_opened.json"), docs_rules_path)

    assert ctx.issue.is_pull_request is True
    assert ctx.issue.is_draft is True
    assert ctx.issue.assignees == ("bob",)
    assert ctx.body == "Fixes #1423"


def test_comment_on_pull_request_fetches_pull_request(fixtures_root: Path, docs_rules_path: Path) -> None:
    payload = _payload(fixtures_root, "issue_comment_created.json")
    client = InMemoryRepositoryClient()
    client.seed("contoso/docs", IssueSnapshot(number=77, author="alice", is_pull_request=True, is_draft=True))

    ctx = _build("issue_comment", payload, docs_rules_path, client)

    assert ctx.issue.is_draft is True
    assert ctx.comment is not None
    assert ctx.comment.id == 9001
    assert ctx.body == "#please-review when you get a chance"


def test_unsupported_event_type(fixtures_root: Path, docs_rules_path: Path) -> None:
    with pytest.raises(UnsupportedEventError, match="push"):
        _build("push", _payload(fixtures_root, "issue_opened.json"), docs_rules_path)


@pytest.mark.parametrize(
    ("mutate", "match"),
    [
        (lambda payload: payload.pop("action"), "'action'"),
        (lambda payload: payload.pop("issue"), "'issue'"),
        (lambda payload: payload.update(issue="nope"), "must be an object"),
        (lambda payload: payload.update(repository={}), "'owner'"),
    ],
    ids=["no_action", "no_issue", "issue_not_object", "no_repository_name"],
)
def test_malformed_payloads(fixtures_root: Path, docs_rules_path: Path, mutate, match: str) -> None:
    payload = _payload(fixtures_root, "issue_opened.json")
    mutate(payload)

    with pytest.raises(PayloadError, match=match):
        _build("issues", payload, docs_rules_path)


def test_pull_request_snapshot_defaults() -> None:
    snapshot = pull_request_snapshot_from_payload({"number": 5})

    assert snapshot == IssueSnapshot(number=5, is_pull_request=True)
