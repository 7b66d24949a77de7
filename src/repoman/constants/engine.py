"""Engine-wide constants: event names, document keys, and limits."""

from __future__ import annotations

EVENT_TYPE_ISSUE: str = "issues"
EVENT_TYPE_PULL_REQUEST: str = "pull_request"
EVENT_TYPE_COMMENT: str = "issue_comment"

SUPPORTED_EVENT_TYPES: frozenset[str] = frozenset(
    {EVENT_TYPE_ISSUE, EVENT_TYPE_PULL_REQUEST, EVENT_TYPE_COMMENT}
)

ACTION_LABELED: str = "labeled"

SCHEMA_VERSION_MINIMUM: int = 1

# Exactly one remap hop is allowed per delivery.
MAX_REMAP_HOPS: int = 1
