"""Webhook delivery mapping."""

from .payloads import (
    build_run_context,
    comment_snapshot_from_payload,
    issue_snapshot_from_payload,
    pull_request_snapshot_from_payload,
    repository_from_payload,
)

__all__ = [
    "build_run_context",
    "comment_snapshot_from_payload",
    "issue_snapshot_from_payload",
    "pull_request_snapshot_from_payload",
    "repository_from_payload",
]
