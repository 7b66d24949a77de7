"""Flush pooled label and assignee operations as consolidated client calls."""

from __future__ import annotations

import logging

from repoman.engine.context import RunContext
from repoman.model import FlushResult

logger = logging.getLogger(__name__)


def flush_pooled_operations(ctx: RunContext) -> FlushResult:
    """Issue one call per non-empty collection, then clear the pool.

    Labels already applied are not re-added, and labels not applied are not
    removed. Flushing an empty pool makes no calls.
    """
    pool = ctx.operations
    if pool.is_empty:
        logger.info("No pooled operations to run")
        return FlushResult()

    to_add = tuple(sorted(label for label in pool.labels_add if not ctx.issue.has_label(label)))
    to_remove = tuple(sorted(label for label in pool.labels_remove if ctx.issue.has_label(label)))
    assignees = tuple(sorted(pool.assignees_add))

    if to_add:
        logger.info("Pooled: adding labels %s", ", ".join(to_add))
        ctx.client.add_labels(ctx.repository, ctx.number, to_add)
    if to_remove:
        logger.info("Pooled: removing labels %s", ", ".join(to_remove))
        ctx.client.remove_labels(ctx.repository, ctx.number, to_remove)
    if assignees:
        logger.info("Pooled: adding assignees %s", ", ".join(assignees))
        ctx.client.add_assignees(ctx.repository, ctx.number, assignees)

    pool.clear()
    return FlushResult(labels_added=to_add, labels_removed=to_remove, assignees_added=assignees)
