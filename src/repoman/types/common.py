"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

NodeKind: TypeAlias = Literal["mapping", "sequence", "scalar", "null"]
OutcomeStatus: TypeAlias = Literal["completed", "unmapped"]
