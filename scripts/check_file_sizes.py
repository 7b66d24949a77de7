#!/usr/bin/env python3
"""Keep repoman modules small enough to review in one sitting.

Counts non-blank, non-comment lines per module under ``src/repoman`` and
``tests``. Going over the soft cap prints a warning; going over the hard cap
exits non-zero. ``--strict`` turns soft-cap warnings into failures too.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

REPO_ROOT: Path = Path(__file__).resolve().parent.parent


@dataclass(frozen=True)
class SizeCaps:
    label: str
    directory: Path
    soft: int
    hard: int


DEFAULT_CAPS: tuple[SizeCaps, ...] = (
    SizeCaps("src", REPO_ROOT / "src" / "repoman", soft=250, hard=400),
    SizeCaps("test", REPO_ROOT / "tests", soft=300, hard=500),
)


def count_loc(path: Path) -> int:
    """Count lines that are neither blank nor comment-only."""
    return sum(
        1
        for line in path.read_text(encoding="utf-8").splitlines()
        if line.strip() and not line.strip().startswith("#")
    )


def check_caps(caps: SizeCaps) -> tuple[list[str], list[str]]:
    """Return (warnings, errors) for every module under ``caps.directory``."""
    warnings: list[str] = []
    errors: list[str] = []
    if not caps.directory.exists():
        return warnings, errors

    for module in sorted(caps.directory.rglob("*.py")):
        if module.name == "__init__.py":
            continue
        loc = count_loc(module)
        rel = module.relative_to(REPO_ROOT)
        if loc > caps.hard:
            errors.append(f"HARD-CAP  {caps.label} {rel}: {loc} LOC (cap {caps.hard})")
        elif loc > caps.soft:
            warnings.append(f"SOFT-CAP  {caps.label} {rel}: {loc} LOC (cap {caps.soft})")
    return warnings, errors


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check repoman module sizes.")
    parser.add_argument("--strict", action="store_true", help="Fail on soft-cap warnings as well")
    args = parser.parse_args(argv)

    warnings: list[str] = []
    errors: list[str] = []
    for caps in DEFAULT_CAPS:
        found_warnings, found_errors = check_caps(caps)
        warnings.extend(found_warnings)
        errors.extend(found_errors)

    for message in warnings:
        print(f"WARNING: {message}")
    for message in errors:
        print(f"ERROR:   {message}")

    if errors or (args.strict and warnings):
        print(f"\n{len(errors)} hard-cap violation(s), {len(warnings)} soft-cap warning(s).")
        return 1
    if not warnings:
        print("All modules within size caps.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
