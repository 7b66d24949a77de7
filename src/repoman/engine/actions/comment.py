"""Immediate comment posting."""

from __future__ import annotations

import logging
from typing import Any

from repoman.constants.steps import STEP_COMMENT
from repoman.engine.context import RunContext
from repoman.engine.nodes import Action
from repoman.exceptions import ConfigurationError
from repoman.utils.nodes import is_scalar, node_kind, scalar_text

logger = logging.getLogger(__name__)


def format_template(template: str, **kwargs: str) -> str:
    """Safe template formatting - missing keys left as literal {key}."""
    result = template
    for key, value in kwargs.items():
        result = result.replace(f"{{{key}}}", value)
    return result


class Comment(Action):
    """Post a comment right away; comments are not pooled."""

    step_name = STEP_COMMENT

    def __init__(self, params: Any, path: str) -> None:
        super().__init__(path)
        if not is_scalar(params):
            raise ConfigurationError(f"{path}: comment text must be a scalar, got {node_kind(params)}")
        self.template = scalar_text(params)
        if not self.template.strip():
            raise ConfigurationError(f"{path}: comment text must not be empty")

    def execute(self, ctx: RunContext) -> None:
        body = format_template(
            self.template,
            author=ctx.author,
            action=ctx.event_action,
            number=str(ctx.number),
        )
        logger.info("Posting comment on %s#%d", ctx.repository, ctx.number)
        ctx.client.post_comment(ctx.repository, ctx.number, body)
