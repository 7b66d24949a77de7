"""Checks over the comment metadata extracted from the issue or PR body."""

from __future__ import annotations

import logging
from typing import Any

from repoman.constants.steps import STEP_CHECK_METADATA, STEP_CHECK_METADATA_EXISTS
from repoman.engine.context import RunContext
from repoman.engine.nodes import Check, as_mapping, as_pattern, as_string_list, require_key

logger = logging.getLogger(__name__)


class MetadataMatches(Check):
    """Passes when metadata field ``name`` exists and matches regex ``value``."""

    step_name = STEP_CHECK_METADATA

    def __init__(self, params: Any, path: str) -> None:
        super().__init__(path)
        mapping = as_mapping(params, path)
        self.name = require_key(mapping, "name", path)
        self.value = require_key(mapping, "value", path)
        self._pattern = as_pattern(self.value, f"{path}.value")
        logger.debug("BUILD: %s name=%s value=%s", self.step_name, self.name, self.value)

    def describe(self) -> str:
        return f"comment metadata: {self.name} for {self.value}"

    def evaluate(self, ctx: RunContext) -> bool:
        actual = ctx.comment_metadata.get(self.name)
        if actual is None:
            return False
        return self._pattern.search(actual) is not None


class MetadataExists(Check):
    """Passes when every named metadata field was found."""

    step_name = STEP_CHECK_METADATA_EXISTS

    def __init__(self, params: Any, path: str) -> None:
        super().__init__(path)
        self.names = as_string_list(params, path)

    def describe(self) -> str:
        return f"{self.step_name} {list(self.names)}"

    def evaluate(self, ctx: RunContext) -> bool:
        return all(name in ctx.comment_metadata for name in self.names)
