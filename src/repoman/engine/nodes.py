"""Node model shared by every rule step.

A step is either a :class:`Check`, which evaluates a predicate and must not
mutate the run, or an :class:`Action`, which mutates the run or queues a side
effect. Both expose ``run(ctx) -> bool``; a False result halts the rest of the
enclosing sequence.

Parameters are parsed in the constructor so that malformed rules fail while
building, before any step runs.
"""

from __future__ import annotations

import enum
import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from repoman.engine.context import RunContext
from repoman.exceptions import ConfigurationError
from repoman.utils.nodes import node_kind, scalar_text

logger = logging.getLogger(__name__)

_TRUE_WORDS: frozenset[str] = frozenset({"true", "yes", "on"})
_FALSE_WORDS: frozenset[str] = frozenset({"false", "no", "off"})


class SubType(enum.Enum):
    """Collection operation carried by add/remove style actions."""

    ADD = "add"
    REMOVE = "remove"


class Node(ABC):
    """Abstract rule step bound to its parsed parameters."""

    step_name: str = ""

    def __init__(self, path: str) -> None:
        self.path = path

    @abstractmethod
    def run(self, ctx: RunContext) -> bool:
        """Execute against *ctx*; return False to stop the enclosing sequence."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path})"


class Check(Node):
    """Side-effect-free predicate over the run state."""

    def run(self, ctx: RunContext) -> bool:
        logger.info("Evaluating %s", self.describe())
        result = self.evaluate(ctx)
        logger.info("%s: %s", self.step_name, "PASS" if result else "FAIL")
        return result

    def describe(self) -> str:
        return self.step_name

    @abstractmethod
    def evaluate(self, ctx: RunContext) -> bool:
        """Return True when the condition holds."""


class Action(Node):
    """Step that mutates the run or queues an external operation."""

    def run(self, ctx: RunContext) -> bool:
        self.execute(ctx)
        return True

    @abstractmethod
    def execute(self, ctx: RunContext) -> None:
        """Perform the action."""


def as_string_list(params: Any, path: str) -> tuple[str, ...]:
    """Scalar -> one value; sequence of scalars -> several values."""
    kind = node_kind(params)
    values: list[str] = []
    if kind == "scalar":
        values.append(scalar_text(params))
    elif kind == "sequence":
        for index, item in enumerate(params):
            if node_kind(item) != "scalar":
                raise ConfigurationError(f"{path}[{index}]: expected a scalar value, got {node_kind(item)}")
            values.append(scalar_text(item))
    else:
        raise ConfigurationError(f"{path}: expected a scalar or a sequence, got {kind}")

    cleaned = tuple(value.strip() for value in values if value.strip())
    if not cleaned:
        raise ConfigurationError(f"{path}: at least one value is required")
    return cleaned


def as_mapping(params: Any, path: str) -> Mapping[str, Any]:
    if node_kind(params) != "mapping":
        raise ConfigurationError(f"{path}: expected a mapping, got {node_kind(params)}")
    return params


def require_key(mapping: Mapping[str, Any], key: str, path: str) -> str:
    """Return the scalar text under *key*, failing when missing or not a scalar."""
    if key not in mapping or mapping[key] is None:
        raise ConfigurationError(f"{path}: missing required key '{key}'")
    value = mapping[key]
    if node_kind(value) != "scalar":
        raise ConfigurationError(f"{path}.{key}: expected a scalar, got {node_kind(value)}")
    return scalar_text(value)


def as_bool(params: Any, path: str) -> bool:
    if isinstance(params, bool):
        return params
    if node_kind(params) == "scalar":
        word = str(params).strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    raise ConfigurationError(f"{path}: expected true or false, got {params!r}")


def as_pattern(text: str, path: str) -> re.Pattern[str]:
    """Compile a rule-supplied regex; matching is case-insensitive."""
    try:
        return re.compile(text, re.IGNORECASE)
    except re.error as exc:
        raise ConfigurationError(f"{path}: invalid regular expression {text!r}: {exc}") from exc
