"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def docs_rules_path(fixtures_root: Path) -> Path:
    """Return the documentation-repository rules fixture."""
    return fixtures_root / "rules" / "docs.repoman.yml"
