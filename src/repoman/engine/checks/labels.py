"""Checks over the labels currently applied to the issue or pull request."""

from __future__ import annotations

from typing import Any

from repoman.constants.steps import STEP_CHECK_LABEL, STEP_CHECK_LABEL_MISSING
from repoman.engine.context import RunContext
from repoman.engine.nodes import Check, as_string_list


class LabelPresent(Check):
    """Passes when every listed label is applied."""

    step_name = STEP_CHECK_LABEL

    def __init__(self, params: Any, path: str) -> None:
        super().__init__(path)
        self.labels = as_string_list(params, path)

    def describe(self) -> str:
        return f"{self.step_name} {list(self.labels)}"

    def evaluate(self, ctx: RunContext) -> bool:
        return all(ctx.issue.has_label(label) for label in self.labels)


class LabelMissing(Check):
    """Passes when none of the listed labels is applied."""

    step_name = STEP_CHECK_LABEL_MISSING

    def __init__(self, params: Any, path: str) -> None:
        super().__init__(path)
        self.labels = as_string_list(params, path)

    def describe(self) -> str:
        return f"{self.step_name} {list(self.labels)}"

    def evaluate(self, ctx: RunContext) -> bool:
        return not any(ctx.issue.has_label(label) for label in self.labels)
