"""Kernel tokens – explicit resolution pass and JSON helpers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from iam_principals.kernel.tokens.deferred import DeferredValue
from iam_principals.observability.logging import get_logger

if TYPE_CHECKING:
    from iam_principals.context import ResolveContext

logger = get_logger(__name__)


def resolve(obj: Any, context: "ResolveContext") -> Any:
    """Return a copy of *obj* with every :class:`DeferredValue` resolved.

    Mappings, lists and tuples are walked recursively.  A resolver may
    itself return a deferred value (or a structure holding one); those are
    resolved in the same pass.  Input structures are never mutated.
    """
    if context is None:
        raise ValueError("resolve() requires a resolution context")
    return _resolve(obj, context)


def _resolve(obj: Any, context: "ResolveContext") -> Any:
    if isinstance(obj, DeferredValue):
        value = obj.resolve(context)
        logger.debug("token.resolved", token=repr(obj))
        return _resolve(value, context)
    if isinstance(obj, Mapping):
        return {key: _resolve(value, context) for key, value in obj.items()}
    if isinstance(obj, list):
        return [_resolve(item, context) for item in obj]
    if isinstance(obj, tuple):
        return tuple(_resolve(item, context) for item in obj)
    return obj


def json_default(obj: Any) -> Any:
    """``json.dumps(default=...)`` hook rendering unresolved values as placeholders.

    Anything exposing ``to_json()`` (deferred values, principals) is
    rendered through it.
    """
    to_json = getattr(obj, "to_json", None)
    if callable(to_json):
        return to_json()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


__all__ = ["json_default", "resolve"]
