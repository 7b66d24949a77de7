"""Select the step sequence for an (event type, event action) pair.

An action entry is either a sequence of steps or a scalar naming another
action in the same event. A scalar is a remap. At most one remap hop is
followed per delivery. A self-remap or a remap onto another remap is a
configuration error.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any

from repoman.config.model import RuleDocument
from repoman.constants.engine import MAX_REMAP_HOPS
from repoman.exceptions import ConfigurationError
from repoman.utils.nodes import node_kind, scalar_text

logger = logging.getLogger(__name__)


class DispatchState(enum.Enum):
    RESOLVED = "resolved"
    UNMAPPED = "unmapped"


@dataclass(frozen=True)
class Resolution:
    """Outcome of dispatch; ``event_action`` is the final action after any remap."""

    state: DispatchState
    event_type: str
    event_action: str
    remapped_from: str | None = None
    steps: Any = None

    @property
    def is_resolved(self) -> bool:
        return self.state is DispatchState.RESOLVED


def resolve_action(document: RuleDocument, event_type: str, event_action: str) -> Resolution:
    """Resolve *event_action* under *event_type*, following at most one remap."""
    actions = document.event(event_type)
    if actions is None:
        logger.info("Event %s not defined in rules. Nothing to do.", event_type)
        return Resolution(DispatchState.UNMAPPED, event_type, event_action)

    action = event_action
    remapped_from: str | None = None
    for _ in range(MAX_REMAP_HOPS + 1):
        if action not in actions:
            logger.info("Action %s not defined in rules. Nothing to do.", action)
            return Resolution(DispatchState.UNMAPPED, event_type, action, remapped_from)

        node = actions[action]
        kind = node_kind(node)
        if kind == "sequence":
            logger.info("Processing action: %s", action)
            return Resolution(DispatchState.RESOLVED, event_type, action, remapped_from, node)
        if kind != "scalar":
            raise ConfigurationError(f"{event_type}.{action}: event actions must use a sequence, got {kind}")

        target = scalar_text(node)
        if target == action:
            raise ConfigurationError(f"{event_type}.{action}: action remaps to itself")
        if remapped_from is not None:
            raise ConfigurationError(
                f"{event_type}.{action}: remapping already happened once ({remapped_from} -> {action}); "
                f"cannot remap again to {target}"
            )
        logger.info("Remap found in rules. From: %s To: %s", action, target)
        remapped_from = action
        action = target

    raise AssertionError("unreachable: remap loop exceeded its bound")
