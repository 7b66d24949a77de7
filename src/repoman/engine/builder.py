"""Builder: turn rule sequences from the document tree into node instances."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeAlias

from repoman.config.model import RuleDocument
from repoman.constants.steps import GROUP_ALLOWED_KEYS, GROUP_FAIL_KEY, GROUP_PASS_KEY, GROUP_STEP
from repoman.engine.actions import CheckGroup
from repoman.engine.nodes import Check, Node
from repoman.engine.registry import STEP_REGISTRY
from repoman.exceptions import ConfigurationError
from repoman.utils.nodes import node_kind, suggest_key

logger = logging.getLogger(__name__)

CompiledPlans: TypeAlias = dict[tuple[str, str], tuple[Node, ...]]


def build_steps(sequence: Any, path: str) -> tuple[Node, ...]:
    """Build every step in *sequence*. Fail-fast on the first malformed step."""
    if node_kind(sequence) != "sequence":
        raise ConfigurationError(f"{path}: expected a sequence of steps, got {node_kind(sequence)}")

    nodes: list[Node] = []
    for index, spec in enumerate(sequence):
        nodes.append(build_step(spec, f"{path}[{index}]"))
    return tuple(nodes)


def build_step(spec: Any, path: str) -> Node:
    """Build a single step mapping ``{step-name: parameters}``."""
    if node_kind(spec) != "mapping" or not spec:
        raise ConfigurationError(f"{path}: each step must be a non-empty mapping, got {node_kind(spec)}")

    if GROUP_STEP in spec:
        return _build_group(spec, f"{path}.{GROUP_STEP}")

    name = str(next(iter(spec)))
    if len(spec) != 1:
        extra = sorted(str(key) for key in spec if str(key) != name)
        raise ConfigurationError(f"{path}: step '{name}' has unexpected keys {extra}")

    factory = STEP_REGISTRY.get(name)
    if factory is None:
        hint = suggest_key(name, (*STEP_REGISTRY, GROUP_STEP))
        message = f"{path}: unknown step '{name}'"
        raise ConfigurationError(f"{message}; {hint}" if hint else message)

    node = factory(spec[name], f"{path}.{name}")
    logger.debug("BUILD: %r", node)
    return node


def _build_group(spec: Mapping[str, Any], path: str) -> CheckGroup:
    unknown = sorted(str(key) for key in spec if key not in GROUP_ALLOWED_KEYS)
    if unknown:
        raise ConfigurationError(f"{path}: unknown keys in check group: {unknown}")

    checks = build_steps(spec[GROUP_STEP], path)
    for node in checks:
        if not isinstance(node, Check):
            raise ConfigurationError(f"{node.path}: only checks are allowed in a check group, got '{node.step_name}'")

    on_pass = _build_branch(spec, GROUP_PASS_KEY, path)
    on_fail = _build_branch(spec, GROUP_FAIL_KEY, path)
    return CheckGroup(
        checks=tuple(node for node in checks if isinstance(node, Check)),
        on_pass=on_pass,
        on_fail=on_fail,
        path=path,
    )


def _build_branch(spec: Mapping[str, Any], key: str, path: str) -> tuple[Node, ...]:
    if key not in spec or spec[key] is None:
        return ()
    return build_steps(spec[key], f"{path}.{key}")


def compile_document(document: RuleDocument) -> CompiledPlans:
    """Build every step sequence in *document*, keyed by (event type, action).

    Remap scalars are left to dispatch; other node kinds are authoring errors.
    """
    plans: CompiledPlans = {}
    for event_type, actions in document.events.items():
        for action, node in actions.items():
            kind = node_kind(node)
            if kind == "scalar":
                continue
            if kind != "sequence":
                raise ConfigurationError(f"{event_type}.{action}: event actions must use a sequence, got {kind}")
            plans[(event_type, action)] = build_steps(node, f"{event_type}.{action}")
    logger.debug("Compiled %d rule sequence(s) from %s", len(plans), document.source)
    return plans
