"""Data model for a loaded rules document."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from repoman.constants.config import (
    DEFAULT_METADATA_HEADERS,
    DEFAULT_METADATA_PARSER,
    DEFAULT_RERUN_LABEL_PREFIX,
)


@dataclass(frozen=True)
class RulesSettings:
    """Resolved ``config`` section of a rules document."""

    metadata_headers: tuple[str, ...] = DEFAULT_METADATA_HEADERS
    metadata_parser: str = DEFAULT_METADATA_PARSER
    rerun_label_prefix: str = DEFAULT_RERUN_LABEL_PREFIX


@dataclass(frozen=True)
class RuleDocument:
    """Immutable rules tree: event type -> event action -> remap target or step sequence.

    Nested mappings are ``MappingProxyType`` and sequences are tuples, so
    nothing downstream of the loader can mutate the rules.
    """

    revision: int
    schema_version: int
    owner: str
    settings: RulesSettings = field(default_factory=RulesSettings)
    events: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    source: str = "<memory>"

    def event(self, event_type: str) -> Mapping[str, Any] | None:
        """Return the action table for *event_type*, or None when undefined."""
        return self.events.get(event_type)

    @property
    def event_types(self) -> tuple[str, ...]:
        return tuple(self.events)
