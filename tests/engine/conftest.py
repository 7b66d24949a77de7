"""Shared fixtures and helpers for engine test modules."""

from __future__ import annotations

import textwrap
from collections.abc import Mapping
from typing import Any

from repoman.clients import InMemoryRepositoryClient, StaticIdentityResolver
from repoman.config import RuleDocument, load_rules_document
from repoman.engine.context import RunContext
from repoman.model import CommentSnapshot, IssueSnapshot

REPOSITORY = "contoso/docs"

RULES_HEADER = "revision: 1\nschema-version: 1\nowner-ms-alias: octocat\n"


def _document(body: str = "") -> RuleDocument:
    """Load a rules document whose event sections are *body*."""
    return load_rules_document(RULES_HEADER + textwrap.dedent(body), "<test>")


def _issue(**overrides: Any) -> IssueSnapshot:
    """Return an issue snapshot authored by alice, merged with *overrides*."""
    base: dict[str, Any] = {
        "number": 42,
        "title": "Broken link",
        "body": "",
        "author": "alice",
        "labels": (),
    }
    base.update(overrides)
    return IssueSnapshot(**base)


def _context(
    document: RuleDocument | None = None,
    *,
    issue: IssueSnapshot | None = None,
    event_type: str = "issues",
    event_action: str = "opened",
    client: InMemoryRepositoryClient | None = None,
    identities: Mapping[str, str] | None = None,
    comment: CommentSnapshot | None = None,
    payload: Mapping[str, Any] | None = None,
    metadata: Mapping[str, str] | None = None,
) -> RunContext:
    """Build a run context with the issue seeded into an in-memory client."""
    resolved_issue = issue or _issue()
    resolved_client = client or InMemoryRepositoryClient()
    resolved_client.seed(REPOSITORY, resolved_issue)
    return RunContext(
        repository=REPOSITORY,
        event_type=event_type,
        event_action=event_action,
        issue=resolved_issue,
        document=document or _document(),
        client=resolved_client,
        identity=StaticIdentityResolver(identities),
        body=comment.body if comment else resolved_issue.body,
        comment=comment,
        payload=dict(payload or {}),
        comment_metadata=dict(metadata or {}),
    )
