"""Tests for collect-all rules validation."""

from __future__ import annotations

from pathlib import Path

from repoman.constants.validation import ALL_RULE_CODES
from repoman.engine.validation import validate_rules_file, validate_rules_text
from repoman.exceptions.validation import format_errors

from .conftest import RULES_HEADER


def _codes(text: str) -> list[str]:
    return [error.code for error in validate_rules_text(text, "rules.yml")]


def test_valid_document_has_no_errors(docs_rules_path: Path) -> None:
    assert validate_rules_file(docs_rules_path) == []


def test_missing_file_is_rule001(tmp_path: Path) -> None:
    errors = validate_rules_file(tmp_path / "absent.yml")

    assert [error.code for error in errors] == ["RULE001"]


def test_invalid_yaml_is_rule003() -> None:
    assert _codes("issues: [unclosed") == ["RULE003"]


def test_non_mapping_root_is_rule004() -> None:
    assert _codes("- just\n- a list\n") == ["RULE004"]


def test_missing_header_keys_are_reported_together() -> None:
    errors = validate_rules_text("issues:\n  opened:\n    - labels-add: x\n", "rules.yml")

    assert [(error.code, error.field) for error in errors] == [
        ("RULE006", "owner-ms-alias"),
        ("RULE006", "revision"),
        ("RULE006", "schema-version"),
    ]


def test_non_integer_and_outdated_header_values() -> None:
    codes = _codes("revision: first\nschema-version: 0\nowner-ms-alias: octocat\n")

    assert codes == ["RULE007", "RULE007"]


def test_bad_config_section_is_rule007() -> None:
    errors = validate_rules_text(RULES_HEADER + "config:\n  rerun-labels-prefix: x\n", "rules.yml")

    assert len(errors) == 1
    assert errors[0].code == "RULE007"
    assert "did you mean `rerun-label-prefix`" in errors[0].message


def test_wrong_node_kinds_are_rule010() -> None:
    text = RULES_HEADER + "issues:\n  opened:\n    labels-add: x\npull_request: [opened]\n"

    errors = validate_rules_text(text, "rules.yml")

    assert [(error.code, error.field) for error in errors] == [
        ("RULE010", "issues.opened"),
        ("RULE010", "pull_request"),
    ]


def test_every_bad_step_is_reported() -> None:
    text = RULES_HEADER + (
        "issues:\n"
        "  opened:\n"
        "    - labels-ad: x\n"
        "  closed:\n"
        "    - check-metadata: Product\n"
    )

    errors = validate_rules_text(text, "rules.yml")

    assert [(error.code, error.field) for error in errors] == [
        ("RULE011", "issues.closed"),
        ("RULE011", "issues.opened"),
    ]


def test_remap_problems_are_reported() -> None:
    text = RULES_HEADER + (
        "issues:\n"
        "  opened:\n"
        "    - labels-add: x\n"
        "  edited: edited\n"
        "  reopened: opened\n"
        "  labeled: reopened\n"
        "  transferred: deleted\n"
    )

    errors = validate_rules_text(text, "rules.yml")

    assert [(error.code, error.field) for error in errors] == [
        ("RULE012", "issues.edited"),
        ("RULE013", "issues.labeled"),
        ("RULE014", "issues.transferred"),
    ]


def test_bom_and_stray_prefix_are_tolerated() -> None:
    assert validate_rules_text("\ufeff?" + RULES_HEADER, "rules.yml") == []


def test_format_errors_is_one_line_per_error() -> None:
    errors = validate_rules_text(RULES_HEADER + "issues:\n  transferred: deleted\n", "rules.yml")

    assert format_errors(errors) == (
        "[RULE014] rules.yml:issues.transferred remap target 'deleted' is not defined "
        "(deliveries for this action will be a no-op)"
    )


def test_reported_codes_are_registered() -> None:
    text = "revision: x\nissues:\n  opened: opened\n  closed:\n    - nope: 1\npull_request: 3\n"

    codes = {error.code for error in validate_rules_text(text, "rules.yml")}

    assert codes <= set(ALL_RULE_CODES)
    assert {"RULE006", "RULE007", "RULE010", "RULE011", "RULE012"} <= codes


def test_remap_to_non_string_action_key_is_defined() -> None:
    text = RULES_HEADER + "issues:\n  1:\n    - labels-add: x\n  reopened: 1\n"

    assert validate_rules_text(text, "rules.yml") == []
