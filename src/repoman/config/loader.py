"""Rules-document loading and normalization."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from repoman.config.model import RuleDocument, RulesSettings
from repoman.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_METADATA_HEADERS,
    CONFIG_METADATA_PARSER,
    CONFIG_RERUN_LABEL_PREFIX,
    CONTENT_API_STRAY_PREFIX,
    DEFAULT_METADATA_HEADERS,
    DEFAULT_METADATA_PARSER,
    DEFAULT_RERUN_LABEL_PREFIX,
    KEY_CONFIG,
    KEY_OWNER,
    KEY_REVISION,
    KEY_SCHEMA_VERSION,
    RESERVED_TOP_KEYS,
)
from repoman.constants.engine import SCHEMA_VERSION_MINIMUM
from repoman.exceptions import ConfigurationError
from repoman.utils.nodes import node_kind, scalar_text, suggest_key

logger = logging.getLogger(__name__)

_REQUIRED_PARSER_GROUPS: frozenset[str] = frozenset({"name", "value"})


def load_rules_file(path: Path) -> RuleDocument:
    """Read and load a rules document from disk."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Failed to read rules file {path}: {exc}") from exc
    return load_rules_document(text, str(path))


def load_rules_document(text: str, source: str = "<memory>") -> RuleDocument:
    """Parse rules YAML into an immutable :class:`RuleDocument`."""
    raw = parse_rules_yaml(text, source)

    revision = _require_int(raw, KEY_REVISION, source)
    schema_version = _require_int(raw, KEY_SCHEMA_VERSION, source)
    if KEY_OWNER not in raw or raw[KEY_OWNER] is None:
        raise ConfigurationError(f"{source}: missing required key '{KEY_OWNER}'")
    owner = str(raw[KEY_OWNER])

    settings = parse_settings(raw.get(KEY_CONFIG), source)

    events: dict[str, Mapping[str, Any]] = {}
    for key, value in raw.items():
        if key in RESERVED_TOP_KEYS:
            continue
        if node_kind(value) != "mapping":
            raise ConfigurationError(f"{source}: event '{key}' must be a mapping of actions")
        events[scalar_text(key)] = _freeze(value)

    logger.info(
        "Rules file %s [revision]: %d [schema-version]: %d [contact]: %s",
        source,
        revision,
        schema_version,
        owner,
    )
    return RuleDocument(
        revision=revision,
        schema_version=schema_version,
        owner=owner,
        settings=settings,
        events=MappingProxyType(events),
        source=source,
    )


def clean_rules_text(text: str) -> str:
    """Strip a BOM or the stray leading '?' the GitHub content API sometimes adds."""
    cleaned = text.lstrip("\ufeff")
    if cleaned.startswith(CONTENT_API_STRAY_PREFIX):
        cleaned = cleaned[len(CONTENT_API_STRAY_PREFIX) :]
    return cleaned


def parse_rules_yaml(text: str, source: str) -> dict[str, Any]:
    """Parse raw rules text into a top-level mapping."""
    cleaned = clean_rules_text(text)

    try:
        raw = yaml.safe_load(cleaned)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {source}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Rules file {source} must contain a mapping")
    return raw


def parse_settings(raw: Any, source: str = "<memory>") -> RulesSettings:
    """Build :class:`RulesSettings` from the ``config`` section."""
    if raw is None:
        return RulesSettings()
    if not isinstance(raw, dict):
        raise ConfigurationError(f"{source}: '{KEY_CONFIG}' must be a mapping")

    for key in raw:
        if key not in ALLOWED_CONFIG_KEYS:
            hint = suggest_key(str(key), ALLOWED_CONFIG_KEYS)
            message = f"{source}: unknown config key '{key}'"
            raise ConfigurationError(f"{message}; {hint}" if hint else message)

    headers_raw = raw.get(CONFIG_METADATA_HEADERS, list(DEFAULT_METADATA_HEADERS))
    if isinstance(headers_raw, str):
        headers_raw = [headers_raw]
    if not isinstance(headers_raw, list) or not all(isinstance(item, str) for item in headers_raw):
        raise ConfigurationError(f"{source}: config.{CONFIG_METADATA_HEADERS} must be a list of strings")

    parser = raw.get(CONFIG_METADATA_PARSER, DEFAULT_METADATA_PARSER)
    if not isinstance(parser, str):
        raise ConfigurationError(f"{source}: config.{CONFIG_METADATA_PARSER} must be a string")
    _validate_parser_pattern(parser, source)

    prefix = raw.get(CONFIG_RERUN_LABEL_PREFIX, DEFAULT_RERUN_LABEL_PREFIX)
    if not isinstance(prefix, str) or not prefix.strip():
        raise ConfigurationError(f"{source}: config.{CONFIG_RERUN_LABEL_PREFIX} must be a non-empty string")

    return RulesSettings(
        metadata_headers=tuple(h for h in headers_raw if h.strip()),
        metadata_parser=parser,
        rerun_label_prefix=prefix.strip().lower(),
    )


def ensure_supported_schema(document: RuleDocument) -> None:
    """Refuse documents whose schema-version is below the supported minimum."""
    if document.schema_version < SCHEMA_VERSION_MINIMUM:
        raise ConfigurationError(
            f"{document.source}: schema-version is out-of-date: {document.schema_version}, "
            f"must be at least {SCHEMA_VERSION_MINIMUM}"
        )


def _validate_parser_pattern(pattern: str, source: str) -> None:
    try:
        compiled = re.compile(pattern)
    except re.error as exc:
        raise ConfigurationError(f"{source}: config.{CONFIG_METADATA_PARSER} is not a valid regex: {exc}") from exc
    missing = _REQUIRED_PARSER_GROUPS - set(compiled.groupindex)
    if missing:
        raise ConfigurationError(
            f"{source}: config.{CONFIG_METADATA_PARSER} must define named groups {sorted(missing)}"
        )


def _require_int(raw: dict[str, Any], key: str, source: str) -> int:
    if key not in raw:
        raise ConfigurationError(f"{source}: missing required key '{key}'")
    value = raw[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{source}: '{key}' must be an integer, got {value!r}")
    return value


def _freeze(value: Any) -> Any:
    """Recursively convert dicts to read-only mappings and lists to tuples."""
    if isinstance(value, dict):
        return MappingProxyType({scalar_text(k): _freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(item) for item in value)
    return value
