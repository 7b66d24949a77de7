"""Rules-document loading, settings, and schema gating.

This package facade re-exports the public names so callers can use
``from repoman.config import ...``.
"""

from __future__ import annotations

from repoman.config.loader import (
    clean_rules_text,
    ensure_supported_schema,
    load_rules_document,
    load_rules_file,
    parse_rules_yaml,
    parse_settings,
)
from repoman.config.model import RuleDocument, RulesSettings

__all__ = [
    "RuleDocument",
    "RulesSettings",
    "clean_rules_text",
    "ensure_supported_schema",
    "load_rules_document",
    "load_rules_file",
    "parse_rules_yaml",
    "parse_settings",
]
