"""Shared utility helpers."""

from __future__ import annotations

from .nodes import is_scalar, node_kind, scalar_text, suggest_key

__all__ = ["is_scalar", "node_kind", "scalar_text", "suggest_key"]
