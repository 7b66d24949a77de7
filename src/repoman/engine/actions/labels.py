"""Pooled label changes."""

from __future__ import annotations

import logging
from typing import Any

from repoman.constants.steps import STEP_LABELS_ADD, STEP_LABELS_REMOVE
from repoman.engine.context import RunContext
from repoman.engine.nodes import Action, SubType, as_string_list

logger = logging.getLogger(__name__)


class Labels(Action):
    """Queue labels for addition or removal at flush time."""

    def __init__(self, params: Any, path: str, *, subtype: SubType) -> None:
        super().__init__(path)
        self.subtype = subtype
        self.step_name = STEP_LABELS_ADD if subtype is SubType.ADD else STEP_LABELS_REMOVE
        self.labels = as_string_list(params, path)
        for label in self.labels:
            logger.debug("BUILD: Label %s: %s", subtype.value, label)

    def execute(self, ctx: RunContext) -> None:
        if self.subtype is SubType.ADD:
            logger.info("Adding labels to pool: %s", ", ".join(self.labels))
            for label in self.labels:
                ctx.operations.add_label(label)
        else:
            logger.info("Adding labels to removal pool: %s", ", ".join(self.labels))
            for label in self.labels:
                ctx.operations.remove_label(label)
