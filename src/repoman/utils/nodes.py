"""Helpers for treating ``yaml.safe_load`` output as a mapping/sequence/scalar node tree."""

from __future__ import annotations

import difflib
from collections.abc import Iterable, Mapping
from typing import Any

from repoman.types.common import NodeKind


def node_kind(value: Any) -> NodeKind:
    """Classify a parsed YAML value by node kind."""
    if value is None:
        return "null"
    if isinstance(value, Mapping):
        return "mapping"
    if isinstance(value, list | tuple):
        return "sequence"
    return "scalar"


def is_scalar(value: Any) -> bool:
    return node_kind(value) == "scalar"


def scalar_text(value: Any) -> str:
    """Render a scalar node the way it reads in the YAML source.

    PyYAML turns ``true`` into ``True``; rule authors expect ``true``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def suggest_key(unknown: str, allowed: Iterable[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
