"""RepoMan: declarative GitHub workflow rules driven by webhook deliveries."""

from __future__ import annotations

__version__ = "1.4.0"

__all__ = ["__version__"]
