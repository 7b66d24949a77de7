"""Checks over the kind, state, and author of the item."""

from __future__ import annotations

import logging
from typing import Any

from repoman.constants.steps import (
    STEP_CHECK_AUTHOR_FTE,
    STEP_CHECK_IS_DRAFT,
    STEP_CHECK_IS_PULL_REQUEST,
)
from repoman.engine.context import RunContext
from repoman.engine.nodes import Check, as_bool

logger = logging.getLogger(__name__)


class _FlagCheck(Check):
    def __init__(self, params: Any, path: str) -> None:
        super().__init__(path)
        self.expected = as_bool(params, path)

    def describe(self) -> str:
        return f"{self.step_name} == {str(self.expected).lower()}"


class IsPullRequest(_FlagCheck):
    step_name = STEP_CHECK_IS_PULL_REQUEST

    def evaluate(self, ctx: RunContext) -> bool:
        return ctx.issue.is_pull_request == self.expected


class IsDraft(_FlagCheck):
    """Issues are never drafts."""

    step_name = STEP_CHECK_IS_DRAFT

    def evaluate(self, ctx: RunContext) -> bool:
        is_draft = ctx.issue.is_pull_request and ctx.issue.is_draft
        return is_draft == self.expected


class AuthorIsFte(_FlagCheck):
    """Compares the author's employee status, as resolved by the identity resolver."""

    step_name = STEP_CHECK_AUTHOR_FTE

    def evaluate(self, ctx: RunContext) -> bool:
        if not ctx.author:
            return not self.expected
        email = ctx.identity.resolve_email(ctx.author)
        logger.debug("Identity for %s: %s", ctx.author, email or "<none>")
        return (email is not None) == self.expected
