"""Step names accepted in rule sequences."""

from __future__ import annotations

STEP_CHECK_LABEL: str = "check-label"
STEP_CHECK_LABEL_MISSING: str = "check-label-missing"
STEP_CHECK_METADATA: str = "check-metadata"
STEP_CHECK_METADATA_EXISTS: str = "check-metadata-exists"
STEP_CHECK_BODY: str = "check-body"
STEP_CHECK_COMMENT_BODY: str = "check-comment-body"
STEP_CHECK_IS_PULL_REQUEST: str = "check-is-pull-request"
STEP_CHECK_IS_DRAFT: str = "check-is-draft"
STEP_CHECK_AUTHOR_FTE: str = "check-author-fte"

STEP_LABELS_ADD: str = "labels-add"
STEP_LABELS_REMOVE: str = "labels-remove"
STEP_ASSIGNEES_ADD: str = "assignees-add"
STEP_ASSIGNEES_REMOVE: str = "assignees-remove"
STEP_COMMENT: str = "comment"

# Branching group: ``check`` list plus optional ``pass`` / ``fail`` lists.
GROUP_STEP: str = "check"
GROUP_PASS_KEY: str = "pass"
GROUP_FAIL_KEY: str = "fail"
GROUP_ALLOWED_KEYS: frozenset[str] = frozenset({GROUP_STEP, GROUP_PASS_KEY, GROUP_FAIL_KEY})

ASSIGNEE_AUTHOR_TOKEN: str = "$author"
ASSIGNEE_METADATA_PREFIX: str = "$metadata:"
