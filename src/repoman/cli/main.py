"""CLI entrypoint for RepoMan."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Mapping
from dataclasses import asdict
from pathlib import Path
from typing import Any

import yaml

from repoman import __version__
from repoman.clients import InMemoryRepositoryClient, StaticIdentityResolver
from repoman.config import load_rules_file
from repoman.constants.branding import CLI_DESCRIPTION
from repoman.constants.config import RULES_FILENAME
from repoman.constants.engine import EVENT_TYPE_PULL_REQUEST, SUPPORTED_EVENT_TYPES
from repoman.engine import RuleEngine
from repoman.engine.validation import validate_rules_file
from repoman.events import (
    build_run_context,
    issue_snapshot_from_payload,
    pull_request_snapshot_from_payload,
    repository_from_payload,
)
from repoman.exceptions import ConfigurationError, RepoManError
from repoman.exceptions.validation import format_errors
from repoman.io import dump_json, load_json_file
from repoman.model import IssueSnapshot


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="repoman",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Validate a rules file without running it")
    validate.add_argument(
        "-r",
        "--rules",
        type=Path,
        default=Path(RULES_FILENAME),
        help=f"Rules file (default: {RULES_FILENAME})",
    )

    run = subparsers.add_parser("run", help="Dry-run the rules against a saved webhook payload")
    run.add_argument(
        "-r",
        "--rules",
        type=Path,
        default=Path(RULES_FILENAME),
        help=f"Rules file (default: {RULES_FILENAME})",
    )
    run.add_argument(
        "-e",
        "--event",
        required=True,
        choices=sorted(SUPPORTED_EVENT_TYPES),
        help="Webhook event type (X-GitHub-Event header value)",
    )
    run.add_argument("-p", "--payload", type=Path, required=True, help="Webhook payload JSON file")
    run.add_argument(
        "-i",
        "--identities",
        type=Path,
        default=None,
        help="YAML mapping of GitHub login to organizational email",
    )
    run.add_argument("-v", "--verbose", action="store_true", help="Show build and evaluation details")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "validate":
        return _handle_validate(args)
    if args.command == "run":
        return _handle_run(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


def _handle_validate(args: argparse.Namespace) -> int:
    errors = validate_rules_file(args.rules)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Rules file is valid.")
    return 0


def _handle_run(args: argparse.Namespace) -> int:
    try:
        document = load_rules_file(args.rules)
        engine = RuleEngine(document)
        payload = _load_payload(args.payload)
        identity = StaticIdentityResolver(_load_identities(args.identities))

        client = InMemoryRepositoryClient()
        repository = repository_from_payload(payload)
        client.seed(repository, _seed_item(args.event, payload))

        ctx = build_run_context(args.event, payload, document=document, client=client, identity=identity)
        outcome = engine.handle(ctx)
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except RepoManError as exc:
        print(f"Run error: {exc}", file=sys.stderr)
        return 1

    report = {
        "outcome": asdict(outcome),
        "writes": [write.as_dict() for write in client.executed_writes],
    }
    print(dump_json(report))
    return 0


def _load_payload(path: Path) -> Mapping[str, Any]:
    try:
        payload = load_json_file(path)
    except (OSError, ValueError) as exc:
        raise ConfigurationError(f"Failed to read payload {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ConfigurationError(f"Payload {path} must contain a JSON object")
    return payload


def _load_identities(path: Path | None) -> dict[str, str]:
    if path is None:
        return {}
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"Failed to read identities file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Identities file {path} must be a mapping of login to email")
    return {str(login): str(email) for login, email in raw.items()}


def _seed_item(event_type: str, payload: Mapping[str, Any]) -> IssueSnapshot:
    if event_type == EVENT_TYPE_PULL_REQUEST:
        return pull_request_snapshot_from_payload(payload.get("pull_request") or {})
    return issue_snapshot_from_payload(payload.get("issue") or {})


if __name__ == "__main__":
    raise SystemExit(main())
