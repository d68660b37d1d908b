"""Kernel tokens – DeferredValue.

A :class:`DeferredValue` stands in for a value that is only known once a
resolution context (partition, account, region of the enclosing
deployment) is available.  Principals embed them in their identity JSON
at construction time; an explicit resolution pass
(:func:`iam_principals.kernel.tokens.resolve`) replaces them later.
"""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from iam_principals.context import ResolveContext

_COUNTER = itertools.count(1)

UNRESOLVED_PLACEHOLDER = "<unresolved-token>"


class DeferredValue:
    """Opaque handle around a resolver function ``(context) -> value``.

    The resolver is invoked on every :meth:`resolve` call; nothing is cached,
    so the same handle yields a context-specific value in each resolution
    pass.  Outside a pass it renders as a placeholder only.

    Example::

        arn = DeferredValue(lambda ctx: f"arn:{ctx.partition}:iam::{ctx.account}:root")
        arn.resolve(context)  # "arn:aws:iam::123456789012:root"
    """

    __slots__ = ("_fn", "_display_hint", "_id")

    def __init__(
        self,
        fn: Callable[["ResolveContext"], Any],
        *,
        display_hint: str | None = None,
    ) -> None:
        self._fn = fn
        self._display_hint = display_hint
        self._id = next(_COUNTER)

    @property
    def display_hint(self) -> str | None:
        return self._display_hint

    def resolve(self, context: "ResolveContext") -> Any:
        """Invoke the resolver for *context*.

        The value has no meaning outside a resolution pass, so a missing
        context is rejected.
        """
        if context is None:
            raise ValueError("DeferredValue can only be resolved with a resolution context")
        return self._fn(context)

    def to_json(self) -> str:
        """Placeholder used when the value is serialised before resolution."""
        if self._display_hint:
            return f"<{self._display_hint}>"
        return UNRESOLVED_PLACEHOLDER

    def __str__(self) -> str:
        return f"${{Token[{self._display_hint or 'TOKEN'}.{self._id}]}}"

    def __repr__(self) -> str:
        return f"DeferredValue({self._display_hint or 'TOKEN'}.{self._id})"


def is_unresolved(value: Any) -> bool:
    """Return ``True`` when *value* is a :class:`DeferredValue`."""
    return isinstance(value, DeferredValue)


__all__ = ["DeferredValue", "UNRESOLVED_PLACEHOLDER", "is_unresolved"]
