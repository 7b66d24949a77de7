"""End-to-end tests for the rule engine over in-memory collaborators."""

from __future__ import annotations

import pytest

from repoman.clients import InMemoryRepositoryClient
from repoman.config import load_rules_document
from repoman.engine import RuleEngine, apply_rerun_label
from repoman.exceptions import ConfigurationError, ExternalFailure
from repoman.model import CommentSnapshot

from .conftest import REPOSITORY, _context, _document, _issue

LABELED_RULES = """
issues:
  labeled:
    - check-label: trigger-label
    - assignees-add: $author
"""


def test_labeled_issue_assigns_author() -> None:
    document = _document(LABELED_RULES)
    ctx = _context(document, issue=_issue(labels=("trigger-label",)), event_action="labeled")

    outcome = RuleEngine(document).handle(ctx)

    assert outcome.status == "completed"
    assert outcome.gates_passed is True
    assert outcome.flushed.assignees_added == ("alice",)
    assert [write.operation for write in ctx.client.executed_writes] == ["add_assignees"]


def test_missing_trigger_label_leaves_pool_empty() -> None:
    document = _document(LABELED_RULES)
    ctx = _context(document, event_action="labeled")

    outcome = RuleEngine(document).handle(ctx)

    assert outcome.status == "completed"
    assert outcome.gates_passed is False
    assert outcome.flushed.is_empty
    assert ctx.client.executed_writes == []


def test_unmapped_action_has_no_effects() -> None:
    document = _document(LABELED_RULES)
    ctx = _context(document, event_action="closed")

    outcome = RuleEngine(document).handle(ctx)

    assert outcome.status == "unmapped"
    assert outcome.event_action == "closed"
    assert ctx.client.executed_writes == []


def test_remapped_action_runs_target_sequence() -> None:
    document = _document(
        """
        issues:
          reopened: opened
          opened:
            - labels-add: needs-triage
        """
    )
    ctx = _context(document, event_action="reopened")

    outcome = RuleEngine(document).handle(ctx)

    assert outcome.event_action == "opened"
    assert outcome.remapped_from == "reopened"
    assert ctx.remapped is True
    assert outcome.flushed.labels_added == ("needs-triage",)


def test_failure_mid_sequence_discards_pool() -> None:
    document = _document(
        """
        issues:
          opened:
            - labels-add: needs-triage
            - comment: Thanks for the report
            - assignees-add: carol
        """
    )
    client = InMemoryRepositoryClient(failing_operations={"post_comment"})
    ctx = _context(document, client=client)

    with pytest.raises(ExternalFailure):
        RuleEngine(document).handle(ctx)

    assert client.executed_writes == []
    assert client.items[(REPOSITORY, 42)].labels == ()


def test_schema_version_below_minimum_is_refused() -> None:
    document = load_rules_document("revision: 3\nschema-version: 0\nowner-ms-alias: octocat\n", "<test>")

    with pytest.raises(ConfigurationError, match="out-of-date"):
        RuleEngine(document)


def test_engine_compiles_every_sequence_up_front() -> None:
    document = _document(
        """
        issues:
          opened:
            - labels-add: triage
          closed:
            - labels-ad: done
        """
    )

    with pytest.raises(ConfigurationError, match="did you mean `labels-add`"):
        RuleEngine(document)


def test_plan_keys_lists_sequences_only() -> None:
    document = _document(
        """
        issues:
          opened:
            - labels-add: triage
          reopened: opened
        """
    )

    engine = RuleEngine(document)

    assert engine.plan_keys == [("issues", "opened")]
    assert len(engine.plan_for("issues", "opened")) == 1


RERUN_RULES = """
issues:
  labeled:
    - labels-add: labeled-ran
  size:
    - labels-add: sized
"""


def test_rerun_label_dispatches_named_action_once() -> None:
    document = _document(RERUN_RULES)
    ctx = _context(
        document,
        issue=_issue(labels=("rerun-action-size",)),
        event_action="labeled",
        payload={"label": {"name": "rerun-action-size"}},
    )

    outcome = RuleEngine(document).handle(ctx)

    assert outcome.event_action == "size"
    assert outcome.remapped_from is None
    assert outcome.flushed.labels_added == ("sized",)
    assert [write.operation for write in ctx.client.executed_writes] == ["remove_labels", "add_labels"]
    assert ctx.client.items[(REPOSITORY, 42)].labels == ("sized",)


def test_rerun_label_refreshes_issue() -> None:
    document = _document(RERUN_RULES)
    client = InMemoryRepositoryClient()
    ctx = _context(
        document,
        issue=_issue(labels=("rerun-action-size",), body="old"),
        event_action="labeled",
        client=client,
    )
    client.seed(REPOSITORY, _issue(labels=("rerun-action-size",), body="fresh"))

    assert apply_rerun_label(ctx) is True
    assert ctx.event_action == "size"
    assert ctx.issue.labels == ()
    assert ctx.body == "fresh"


def test_rerun_label_keeps_comment_body_for_comment_events() -> None:
    document = _document(RERUN_RULES)
    comment = CommentSnapshot(id=7, author="bob", body="#please-review")
    ctx = _context(
        document,
        issue=_issue(labels=("rerun-action-size",)),
        event_type="issue_comment",
        event_action="labeled",
        comment=comment,
    )

    assert apply_rerun_label(ctx) is True
    assert ctx.body == "#please-review"


def test_non_trigger_label_is_ignored() -> None:
    document = _document(RERUN_RULES)
    ctx = _context(
        document,
        issue=_issue(labels=("bug",)),
        event_action="labeled",
        payload={"label": {"name": "bug"}},
    )

    outcome = RuleEngine(document).handle(ctx)

    assert outcome.event_action == "labeled"
    assert outcome.flushed.labels_added == ("labeled-ran",)


def test_rerun_label_only_applies_to_labeled_deliveries() -> None:
    ctx = _context(_document(RERUN_RULES), issue=_issue(labels=("rerun-action-size",)))

    assert apply_rerun_label(ctx) is False
    assert ctx.event_action == "opened"
    assert ctx.client.executed_writes == []


def test_metadata_is_extracted_before_dispatch() -> None:
    document = _document(
        """
        issues:
          opened:
            - check-metadata:
                name: Product
                value: ^dotnet
            - assignees-add: $metadata:GitHub Login
        """
    )
    body = "Typo in sample.\n\n#### Document Details\n\n* Product: **dotnet-csharp**\n* GitHub Login: @BillWagner\n"
    ctx = _context(document, issue=_issue(body=body))

    outcome = RuleEngine(document).handle(ctx)

    assert ctx.comment_metadata["Product"] == "dotnet-csharp"
    assert outcome.flushed.assignees_added == ("BillWagner",)


def test_rerun_action_remap_runs_target_sequence_once() -> None:
    document = _document(
        """
        issues:
          rerun-action-size: size
          size:
            - labels-add: sized
        """
    )
    ctx = _context(document, event_action="rerun-action-size")

    outcome = RuleEngine(document).handle(ctx)

    assert outcome.status == "completed"
    assert outcome.event_action == "size"
    assert outcome.remapped_from == "rerun-action-size"
    assert len(ctx.client.writes_for("add_labels")) == 1
    assert ctx.client.writes_for("add_labels")[0].payload == ("sized",)
    assert ctx.client.items[(REPOSITORY, 42)].labels == ("sized",)


def test_remap_to_non_string_action_key_dispatches() -> None:
    document = _document(
        """
        issues:
          1:
            - labels-add: first
          reopened: 1
        """
    )
    ctx = _context(document, event_action="reopened")

    outcome = RuleEngine(document).handle(ctx)

    assert outcome.event_action == "1"
    assert outcome.flushed.labels_added == ("first",)
