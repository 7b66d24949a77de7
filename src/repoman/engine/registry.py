"""Fixed step-name registry.

Maps each step name to the constructor of its node. Only registered names
can appear in a rules document.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from typing import Any, TypeAlias

from repoman.constants.steps import (
    STEP_ASSIGNEES_ADD,
    STEP_ASSIGNEES_REMOVE,
    STEP_CHECK_AUTHOR_FTE,
    STEP_CHECK_BODY,
    STEP_CHECK_COMMENT_BODY,
    STEP_CHECK_IS_DRAFT,
    STEP_CHECK_IS_PULL_REQUEST,
    STEP_CHECK_LABEL,
    STEP_CHECK_LABEL_MISSING,
    STEP_CHECK_METADATA,
    STEP_CHECK_METADATA_EXISTS,
    STEP_COMMENT,
    STEP_LABELS_ADD,
    STEP_LABELS_REMOVE,
)
from repoman.engine.actions import Assignees, Comment, Labels
from repoman.engine.checks import (
    AuthorIsFte,
    BodyMatches,
    CommentBodyMatches,
    IsDraft,
    IsPullRequest,
    LabelMissing,
    LabelPresent,
    MetadataExists,
    MetadataMatches,
)
from repoman.engine.nodes import Node, SubType

StepFactory: TypeAlias = Callable[[Any, str], Node]

STEP_REGISTRY: dict[str, StepFactory] = {
    STEP_CHECK_LABEL: LabelPresent,
    STEP_CHECK_LABEL_MISSING: LabelMissing,
    STEP_CHECK_METADATA: MetadataMatches,
    STEP_CHECK_METADATA_EXISTS: MetadataExists,
    STEP_CHECK_BODY: BodyMatches,
    STEP_CHECK_COMMENT_BODY: CommentBodyMatches,
    STEP_CHECK_IS_PULL_REQUEST: IsPullRequest,
    STEP_CHECK_IS_DRAFT: IsDraft,
    STEP_CHECK_AUTHOR_FTE: AuthorIsFte,
    STEP_LABELS_ADD: partial(Labels, subtype=SubType.ADD),
    STEP_LABELS_REMOVE: partial(Labels, subtype=SubType.REMOVE),
    STEP_ASSIGNEES_ADD: partial(Assignees, subtype=SubType.ADD),
    STEP_ASSIGNEES_REMOVE: partial(Assignees, subtype=SubType.REMOVE),
    STEP_COMMENT: Comment,
}
