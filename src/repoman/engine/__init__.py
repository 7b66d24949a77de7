"""Declarative rule engine: node model, runner, dispatch, and pooled operations."""

from __future__ import annotations

from repoman.engine.builder import build_steps, compile_document
from repoman.engine.context import PooledOperations, RunContext
from repoman.engine.dispatch import DispatchState, Resolution, resolve_action
from repoman.engine.nodes import Action, Check, Node, SubType
from repoman.engine.pool import flush_pooled_operations
from repoman.engine.runner import Runner
from repoman.engine.runtime import RuleEngine, apply_rerun_label

__all__ = [
    "Action",
    "Check",
    "DispatchState",
    "Node",
    "PooledOperations",
    "Resolution",
    "RuleEngine",
    "RunContext",
    "Runner",
    "SubType",
    "apply_rerun_label",
    "build_steps",
    "compile_document",
    "flush_pooled_operations",
    "resolve_action",
]
