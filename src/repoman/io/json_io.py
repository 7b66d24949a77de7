"""JSON read/write helpers for delivery payloads and CLI output."""

from __future__ import annotations

import json
from pathlib import Path


def load_json_file(path: Path) -> object:
    """Load and parse JSON from disk."""
    return json.loads(path.read_text(encoding="utf-8"))


def dump_json(payload: object) -> str:
    """Serialize *payload* with stable key order for terminal output."""
    return json.dumps(payload, indent=2, sort_keys=True)
