"""Branching group: run ``pass`` or ``fail`` depending on a list of checks."""

from __future__ import annotations

import logging

from repoman.constants.steps import GROUP_STEP
from repoman.engine.context import RunContext
from repoman.engine.nodes import Action, Check, Node
from repoman.engine.runner import Runner

logger = logging.getLogger(__name__)


class CheckGroup(Action):
    """Evaluate checks as an implicit AND, then run one branch.

    The group never gates its enclosing sequence. A failing check inside a
    branch stops only that branch.
    """

    step_name = GROUP_STEP

    def __init__(
        self,
        checks: tuple[Check, ...],
        on_pass: tuple[Node, ...],
        on_fail: tuple[Node, ...],
        path: str,
    ) -> None:
        super().__init__(path)
        self.checks = checks
        self.on_pass = on_pass
        self.on_fail = on_fail

    def execute(self, ctx: RunContext) -> None:
        passed = all(check.run(ctx) for check in self.checks)
        branch = self.on_pass if passed else self.on_fail
        logger.info(
            "Check group %s: running %s branch (%d step(s))",
            self.path,
            "pass" if passed else "fail",
            len(branch),
        )
        Runner(branch).run(ctx)
