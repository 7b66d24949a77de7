"""Map GitHub webhook payloads onto a fresh :class:`RunContext`."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from repoman.clients.base import IdentityResolver, RepositoryClient
from repoman.config.model import RuleDocument
from repoman.constants.engine import (
    EVENT_TYPE_COMMENT,
    EVENT_TYPE_ISSUE,
    EVENT_TYPE_PULL_REQUEST,
    SUPPORTED_EVENT_TYPES,
)
from repoman.engine.context import RunContext
from repoman.exceptions import PayloadError, UnsupportedEventError
from repoman.model import CommentSnapshot, IssueSnapshot

logger = logging.getLogger(__name__)


def build_run_context(
    event_type: str,
    payload: Mapping[str, Any],
    *,
    document: RuleDocument,
    client: RepositoryClient,
    identity: IdentityResolver,
) -> RunContext:
    """Create the run state for one delivery."""
    if event_type not in SUPPORTED_EVENT_TYPES:
        raise UnsupportedEventError(f"Event isn't supported: {event_type}")

    action = str(_require(payload, "action", "payload"))
    repository = repository_from_payload(payload)
    comment: CommentSnapshot | None = None

    if event_type == EVENT_TYPE_PULL_REQUEST:
        issue = pull_request_snapshot_from_payload(_require_mapping(payload, "pull_request", "payload"))
        body = issue.body
    else:
        raw_issue = _require_mapping(payload, "issue", "payload")
        issue = issue_snapshot_from_payload(raw_issue)
        if issue.is_pull_request:
            issue = client.get_pull_request(repository, issue.number)
        body = issue.body
        if event_type == EVENT_TYPE_COMMENT:
            comment = comment_snapshot_from_payload(_require_mapping(payload, "comment", "payload"))
            body = comment.body

    logger.info(
        "Type: %s Id: %d Action: %s Repo: %s",
        event_type,
        issue.number,
        action,
        repository,
    )
    return RunContext(
        repository=repository,
        event_type=event_type,
        event_action=action,
        issue=issue,
        document=document,
        client=client,
        identity=identity,
        body=body,
        comment=comment,
        payload=payload,
    )


def repository_from_payload(payload: Mapping[str, Any]) -> str:
    repo = _require_mapping(payload, "repository", "payload")
    full_name = repo.get("full_name")
    if isinstance(full_name, str) and full_name:
        return full_name
    owner = _require_mapping(repo, "owner", "repository")
    return f"{_require(owner, 'login', 'repository.owner')}/{_require(repo, 'name', 'repository')}"


def issue_snapshot_from_payload(raw: Mapping[str, Any]) -> IssueSnapshot:
    """Convert an ``issue`` object; items carrying ``pull_request`` are PRs."""
    return IssueSnapshot(
        number=int(_require(raw, "number", "issue")),
        title=str(raw.get("title") or ""),
        body=str(raw.get("body") or ""),
        author=_login(raw.get("user")),
        state=str(raw.get("state") or "open"),
        labels=_label_names(raw.get("labels")),
        assignees=tuple(_login(item) for item in raw.get("assignees") or () if _login(item)),
        is_pull_request=raw.get("pull_request") is not None,
        is_draft=bool(raw.get("draft", False)),
    )


def pull_request_snapshot_from_payload(raw: Mapping[str, Any]) -> IssueSnapshot:
    """Convert a ``pull_request`` object."""
    return IssueSnapshot(
        number=int(_require(raw, "number", "pull_request")),
        title=str(raw.get("title") or ""),
        body=str(raw.get("body") or ""),
        author=_login(raw.get("user")),
        state=str(raw.get("state") or "open"),
        labels=_label_names(raw.get("labels")),
        assignees=tuple(_login(item) for item in raw.get("assignees") or () if _login(item)),
        is_pull_request=True,
        is_draft=bool(raw.get("draft", False)),
    )


def comment_snapshot_from_payload(raw: Mapping[str, Any]) -> CommentSnapshot:
    return CommentSnapshot(
        id=int(_require(raw, "id", "comment")),
        author=_login(raw.get("user")),
        body=str(raw.get("body") or ""),
    )


def _label_names(raw: Any) -> tuple[str, ...]:
    names: list[str] = []
    for item in raw or ():
        if isinstance(item, Mapping):
            name = item.get("name")
        else:
            name = item
        if isinstance(name, str) and name:
            names.append(name)
    return tuple(names)


def _login(raw: Any) -> str:
    if isinstance(raw, Mapping):
        login = raw.get("login")
        return login if isinstance(login, str) else ""
    return ""


def _require(raw: Mapping[str, Any], key: str, where: str) -> Any:
    if key not in raw or raw[key] is None:
        raise PayloadError(f"{where} is missing required field '{key}'")
    return raw[key]


def _require_mapping(raw: Mapping[str, Any], key: str, where: str) -> Mapping[str, Any]:
    value = _require(raw, key, where)
    if not isinstance(value, Mapping):
        raise PayloadError(f"{where}.{key} must be an object")
    return value
