"""Kernel conditions – Conditions type and the overlay merge."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from iam_principals.kernel.errors import MergeConflictError
from iam_principals.kernel.tokens import is_unresolved
from iam_principals.observability.logging import get_logger

logger = get_logger(__name__)

Condition = Any
"""Value of a single operator: ``{condition-key: value(s)}`` or a DeferredValue."""

Conditions = dict[str, Condition]
"""Condition set: ``{operator: {condition-key: value(s)}}``."""


def _copy_condition(condition: Condition) -> Condition:
    if not isinstance(condition, Mapping):
        return condition
    return {key: list(value) if isinstance(value, list) else value for key, value in condition.items()}


def copy_conditions(conditions: Mapping[str, Condition] | None) -> Conditions:
    """Return a copy of *conditions* sharing no mutable container with it.

    Operator mappings and list values are copied; deferred values and
    scalars are kept as they are.
    """
    if not conditions:
        return {}
    return {operator: _copy_condition(condition) for operator, condition in conditions.items()}


def merge_conditions(base: Mapping[str, Condition], overlay: Mapping[str, Condition]) -> Conditions:
    """Merge *overlay* on top of *base* and return a new condition set.

    * operators only present on one side are copied over;
    * operators present on both sides are merged key by key, one level
      deep, with *overlay* winning on key collision.

    Neither input is mutated and the result shares no operator mapping
    with either of them.  Iteration follows insertion order (*base*
    first), so identical inputs always produce identical output.

    Known restriction: a colliding operator whose value on either side is
    an unresolved deferred value cannot be merged, because its keys are
    unknown until resolution.  That raises :class:`MergeConflictError`;
    callers must restructure their principals so the operator is only
    supplied once.
    """
    merged: Conditions = copy_conditions(base)

    for operator, condition in overlay.items():
        existing = merged.get(operator)
        if operator not in merged or existing is None:
            merged[operator] = _copy_condition(condition)
            continue

        if is_unresolved(condition) or is_unresolved(existing):
            error = MergeConflictError(operator)
            logger.warning("conditions.merge_conflict", **error.to_dict())
            raise error

        merged[operator] = {**existing, **_copy_condition(condition)}

    logger.debug("conditions.merged", operators=list(merged))
    return merged


def has_conditions(conditions: Mapping[str, Condition] | None) -> bool:
    """Return ``True`` when *conditions* holds at least one operator."""
    return bool(conditions)


__all__ = ["Condition", "Conditions", "copy_conditions", "has_conditions", "merge_conditions"]
