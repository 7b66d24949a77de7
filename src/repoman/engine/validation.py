"""Collect-all validation for rules documents.

Returns a list of :class:`ValidationError` instances rather than raising, so
callers can report every problem in one pass.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from repoman.config.loader import clean_rules_text, parse_settings
from repoman.constants.config import (
    KEY_CONFIG,
    KEY_OWNER,
    KEY_REVISION,
    KEY_SCHEMA_VERSION,
    RESERVED_TOP_KEYS,
)
from repoman.constants.engine import SCHEMA_VERSION_MINIMUM
from repoman.constants.validation import (
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
from repoman.engine.builder import build_steps
from repoman.exceptions import ConfigurationError
from repoman.exceptions.validation import ValidationError, sort_errors
from repoman.utils.nodes import node_kind, scalar_text


def validate_rules_file(path: Path) -> list[ValidationError]:
    """Read *path* and validate it; unreadable files yield a single RULE001 error."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        return [
            ValidationError(
                code=RULE001,
                path=str(path),
                field="",
                message=f"rules file not readable: {exc}",
            )
        ]
    return validate_rules_text(text, str(path))


def validate_rules_text(text: str, source: str = "<memory>") -> list[ValidationError]:
    """Validate rules YAML and return every problem in deterministic order."""
    cleaned = clean_rules_text(text)

    try:
        raw = yaml.safe_load(cleaned)
    except yaml.YAMLError as exc:
        return [ValidationError(code=RULE003, path=source, field="", message=f"invalid YAML: {exc}")]

    if not isinstance(raw, dict):
        return [
            ValidationError(
                code=RULE004,
                path=source,
                field="",
                message=f"rules file must contain a mapping, got {node_kind(raw)}",
            )
        ]

    errors: list[ValidationError] = []
    _validate_header(raw, source, errors)

    for event_type, actions in raw.items():
        if event_type in RESERVED_TOP_KEYS:
            continue
        if node_kind(actions) != "mapping":
            errors.append(
                ValidationError(
                    code=RULE010,
                    path=source,
                    field=str(event_type),
                    message=f"event must be a mapping of actions, got {node_kind(actions)}",
                )
            )
            continue
        _validate_event(str(event_type), actions, source, errors)

    return sort_errors(errors)


def _validate_header(raw: dict[str, Any], source: str, errors: list[ValidationError]) -> None:
    for key in (KEY_REVISION, KEY_SCHEMA_VERSION, KEY_OWNER):
        if key not in raw or raw[key] is None:
            errors.append(
                ValidationError(code=RULE006, path=source, field=key, message=f"missing required key '{key}'")
            )

    for key in (KEY_REVISION, KEY_SCHEMA_VERSION):
        value = raw.get(key)
        if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
            errors.append(
                ValidationError(code=RULE007, path=source, field=key, message=f"must be an integer, got {value!r}")
            )

    schema_version = raw.get(KEY_SCHEMA_VERSION)
    if isinstance(schema_version, int) and not isinstance(schema_version, bool):
        if schema_version < SCHEMA_VERSION_MINIMUM:
            errors.append(
                ValidationError(
                    code=RULE007,
                    path=source,
                    field=KEY_SCHEMA_VERSION,
                    message=f"schema-version is out-of-date: {schema_version}",
                    hint=f"must be at least {SCHEMA_VERSION_MINIMUM}",
                )
            )

    try:
        parse_settings(raw.get(KEY_CONFIG), source)
    except ConfigurationError as exc:
        errors.append(ValidationError(code=RULE007, path=source, field=KEY_CONFIG, message=str(exc)))


def _validate_event(
    event_type: str,
    actions: dict[str, Any],
    source: str,
    errors: list[ValidationError],
) -> None:
    named = {scalar_text(key): node for key, node in actions.items()}
    for action, node in named.items():
        field = f"{event_type}.{action}"
        kind = node_kind(node)
        if kind == "sequence":
            try:
                build_steps(node, field)
            except ConfigurationError as exc:
                errors.append(ValidationError(code=RULE011, path=source, field=field, message=str(exc)))
            continue
        if kind != "scalar":
            errors.append(
                ValidationError(
                    code=RULE010,
                    path=source,
                    field=field,
                    message=f"event actions must use a sequence or a remap target, got {kind}",
                )
            )
            continue
        _validate_remap(action, scalar_text(node), named, field, source, errors)


def _validate_remap(
    action: str,
    target: str,
    actions: dict[str, Any],
    field: str,
    source: str,
    errors: list[ValidationError],
) -> None:
    if target == action:
        errors.append(ValidationError(code=RULE012, path=source, field=field, message="action remaps to itself"))
        return
    if target not in actions:
        errors.append(
            ValidationError(
                code=RULE014,
                path=source,
                field=field,
                message=f"remap target '{target}' is not defined",
                hint="deliveries for this action will be a no-op",
            )
        )
        return
    if node_kind(actions[target]) == "scalar":
        errors.append(
            ValidationError(
                code=RULE013,
                path=source,
                field=field,
                message=f"remap target '{target}' is itself a remap; only one hop is allowed",
            )
        )
