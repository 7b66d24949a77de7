"""Sequential interpreter for built rule steps."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from repoman.engine.context import RunContext
from repoman.engine.nodes import Node

logger = logging.getLogger(__name__)


class Runner:
    """Execute steps in order; a failing check stops the rest of this list only."""

    def __init__(self, steps: Sequence[Node]) -> None:
        self._steps = tuple(steps)

    @property
    def steps(self) -> tuple[Node, ...]:
        return self._steps

    def run(self, ctx: RunContext) -> bool:
        """Return True when every step ran, False when a check stopped the sequence."""
        for index, step in enumerate(self._steps):
            logger.info("Running step %s (%s)", step.step_name, step.path)
            if not step.run(ctx):
                remaining = len(self._steps) - index - 1
                logger.info("Check %s failed; skipping %d remaining step(s)", step.path, remaining)
                return False
        return True
