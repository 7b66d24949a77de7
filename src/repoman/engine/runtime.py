"""Rule engine runtime: one pass over one delivery.

The engine builds every rule sequence when it is constructed. Handling a
delivery then runs these steps: rerun-label trigger, metadata extraction,
dispatch, runner, and pool flush. Any exception aborts the run before the
flush, so pooled operations are discarded.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from repoman.config.loader import ensure_supported_schema
from repoman.config.model import RuleDocument
from repoman.constants.engine import ACTION_LABELED, EVENT_TYPE_COMMENT
from repoman.engine.builder import CompiledPlans, compile_document
from repoman.engine.context import RunContext
from repoman.engine.dispatch import resolve_action
from repoman.engine.nodes import Node
from repoman.engine.pool import flush_pooled_operations
from repoman.engine.runner import Runner
from repoman.model import RunOutcome
from repoman.parsers import CommentMetadataExtractor, MetadataExtractor

logger = logging.getLogger(__name__)


class RuleEngine:
    """Declarative rule engine bound to one loaded rules document."""

    def __init__(self, document: RuleDocument, *, extractor: MetadataExtractor | None = None) -> None:
        ensure_supported_schema(document)
        self._document = document
        self._extractor = extractor or CommentMetadataExtractor(document.settings)
        self._plans: CompiledPlans = compile_document(document)

    @property
    def document(self) -> RuleDocument:
        return self._document

    @property
    def plan_keys(self) -> list[tuple[str, str]]:
        """Sorted (event type, action) pairs that have a step sequence."""
        return sorted(self._plans)

    def plan_for(self, event_type: str, event_action: str) -> tuple[Node, ...]:
        return self._plans[(event_type, event_action)]

    def handle(self, ctx: RunContext) -> RunOutcome:
        """Run the rules for the delivery in *ctx* and flush its pooled operations."""
        apply_rerun_label(ctx)
        ctx.comment_metadata = self._extractor.extract(ctx.body)

        resolution = resolve_action(self._document, ctx.event_type, ctx.event_action)
        ctx.remapped = resolution.remapped_from is not None
        ctx.event_action = resolution.event_action
        if not resolution.is_resolved:
            return RunOutcome(
                status="unmapped",
                event_type=ctx.event_type,
                event_action=ctx.event_action,
                remapped_from=resolution.remapped_from,
            )

        gates_passed = Runner(self.plan_for(ctx.event_type, ctx.event_action)).run(ctx)
        flushed = flush_pooled_operations(ctx)
        return RunOutcome(
            status="completed",
            event_type=ctx.event_type,
            event_action=ctx.event_action,
            remapped_from=resolution.remapped_from,
            gates_passed=gates_passed,
            flushed=flushed,
        )


def apply_rerun_label(ctx: RunContext) -> bool:
    """Turn a ``rerun-action-<name>`` label into event action ``<name>``.

    The trigger label is removed immediately and the item is re-fetched.
    Returns True when a trigger label was found.
    """
    if ctx.event_action != ACTION_LABELED:
        return False

    prefix = ctx.document.settings.rerun_label_prefix
    label = _applied_label(ctx.payload) or next(
        (name for name in ctx.issue.labels if name.lower().startswith(prefix)),
        None,
    )
    if label is None or not label.lower().startswith(prefix):
        return False

    target = label.lower()[len(prefix) :]
    if not target:
        return False

    logger.info("Magic label found: %s; reprocessing %s#%d as %s", label, ctx.repository, ctx.number, target)
    ctx.event_action = target
    ctx.client.remove_labels(ctx.repository, ctx.number, [label])
    ctx.refresh_issue()
    if ctx.event_type != EVENT_TYPE_COMMENT:
        ctx.body = ctx.issue.body
    return True


def _applied_label(payload: Mapping[str, Any]) -> str | None:
    label = payload.get("label")
    if isinstance(label, Mapping) and isinstance(label.get("name"), str):
        return label["name"]
    return None
