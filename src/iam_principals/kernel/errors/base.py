"""Root error class for the iam-principals error hierarchy.

Errors double as structured log payloads::

    error = MergeConflictError("StringEquals")
    logger.warning("conditions.merge_conflict", **error.to_dict())

Subclasses name the attributes that payload must carry in
``context_fields``.
"""

from __future__ import annotations

import json
from typing import Any, ClassVar


def _render(obj: Any) -> Any:
    # Deferred values and principals expose their placeholder JSON.
    to_json = getattr(obj, "to_json", None)
    if callable(to_json):
        return to_json()
    return str(obj)


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Arbitrary extra context.
        cause: Original exception that triggered this error.
    """

    default_code: ClassVar[str] = "base_error"
    context_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """Single-line JSON; unresolved values render as placeholders."""
        return json.dumps(self.to_dict(), ensure_ascii=False, default=_render)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain dict with ``code``, ``message``, ``detail`` and every context field."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        for name in self.context_fields:
            payload[name] = getattr(self, name)
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
