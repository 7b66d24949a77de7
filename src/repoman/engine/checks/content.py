"""Regex checks over body text."""

from __future__ import annotations

from typing import Any

from repoman.constants.steps import STEP_CHECK_BODY, STEP_CHECK_COMMENT_BODY
from repoman.engine.context import RunContext
from repoman.engine.nodes import Check, as_pattern
from repoman.exceptions import ConfigurationError
from repoman.utils.nodes import is_scalar, node_kind, scalar_text


class _PatternCheck(Check):
    def __init__(self, params: Any, path: str) -> None:
        super().__init__(path)
        if not is_scalar(params):
            raise ConfigurationError(f"{path}: expected a regex scalar, got {node_kind(params)}")
        self.expression = scalar_text(params)
        self._pattern = as_pattern(self.expression, path)

    def describe(self) -> str:
        return f"{self.step_name} /{self.expression}/"


class BodyMatches(_PatternCheck):
    """Passes when the issue or pull-request body matches."""

    step_name = STEP_CHECK_BODY

    def evaluate(self, ctx: RunContext) -> bool:
        return self._pattern.search(ctx.issue.body or "") is not None


class CommentBodyMatches(_PatternCheck):
    """Passes when the delivery carries a comment whose body matches."""

    step_name = STEP_CHECK_COMMENT_BODY

    def evaluate(self, ctx: RunContext) -> bool:
        if ctx.comment is None:
            return False
        return self._pattern.search(ctx.comment.body or "") is not None
