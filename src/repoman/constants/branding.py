"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "RepoMan"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: GitHub workflow rules for issues and pull requests"
