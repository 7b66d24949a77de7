"""Pooled assignee additions."""

from __future__ import annotations

import logging
from typing import Any

from repoman.constants.steps import (
    ASSIGNEE_AUTHOR_TOKEN,
    ASSIGNEE_METADATA_PREFIX,
    STEP_ASSIGNEES_ADD,
)
from repoman.engine.context import RunContext
from repoman.engine.nodes import Action, SubType, as_string_list
from repoman.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class Assignees(Action):
    """Queue assignees for addition.

    Values are logins, ``$author`` for the item author, or
    ``$metadata:<name>`` for a login captured in the comment metadata.
    """

    step_name = STEP_ASSIGNEES_ADD

    def __init__(self, params: Any, path: str, *, subtype: SubType) -> None:
        super().__init__(path)
        if subtype is not SubType.ADD:
            raise ConfigurationError(f"{path}: assignee actions only support add")
        self.subtype = subtype
        self.names = as_string_list(params, path)
        for name in self.names:
            if name.startswith(ASSIGNEE_METADATA_PREFIX) and not name[len(ASSIGNEE_METADATA_PREFIX) :].strip():
                raise ConfigurationError(f"{path}: '{ASSIGNEE_METADATA_PREFIX}' needs a metadata field name")
            logger.debug("BUILD: Assignee: %s", name)

    def execute(self, ctx: RunContext) -> None:
        logger.info("Adding assignees to pool")
        for name in self.names:
            login = self._resolve(name, ctx)
            if login:
                ctx.operations.add_assignee(login)

    @staticmethod
    def _resolve(name: str, ctx: RunContext) -> str | None:
        if name == ASSIGNEE_AUTHOR_TOKEN:
            login = ctx.author
        elif name.startswith(ASSIGNEE_METADATA_PREFIX):
            field_name = name[len(ASSIGNEE_METADATA_PREFIX) :].strip()
            login = ctx.comment_metadata.get(field_name, "")
        else:
            login = name

        login = login.strip().lstrip("@")
        if not login:
            logger.warning("Assignee %s did not resolve to a login; skipping", name)
            return None
        return login
