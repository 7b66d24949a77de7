"""Stable validation error codes for rules-document validation."""

from __future__ import annotations

RULE001: str = "RULE001"  # rules file not found / unreadable
RULE003: str = "RULE003"  # invalid YAML parse
RULE004: str = "RULE004"  # top-level value is not a mapping
RULE006: str = "RULE006"  # missing required field
RULE007: str = "RULE007"  # invalid value / schema too old
RULE010: str = "RULE010"  # event or action node has the wrong kind
RULE011: str = "RULE011"  # step failed to build
RULE012: str = "RULE012"  # action remaps to itself
RULE013: str = "RULE013"  # remap target is itself a remap
RULE014: str = "RULE014"  # remap target not defined

ALL_RULE_CODES: tuple[str, ...] = (
    RULE001,
    RULE003,
    RULE004,
    RULE006,
    RULE007,
    RULE010,
    RULE011,
    RULE012,
    RULE013,
    RULE014,
)
