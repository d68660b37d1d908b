"""Domain errors — invariant, validation and merge failures of principals."""

from __future__ import annotations

from typing import Any

from iam_principals.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a modelling rule / invariant is violated."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """An object invariant was violated."""

    default_code = "invariant_violation"


class ConstructionError(InvariantViolationError):
    """An object could not be constructed from the given arguments.

    Raised eagerly, at construction time (e.g. a composite principal
    built without members).
    """

    default_code = "construction_error"


class ValidationError(DomainError):
    """A principal cannot be rendered in the requested form.

    ``errors`` is a list of item-level validation failures.
    """

    default_code = "validation_error"
    context_fields = ("errors",)

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []


class ConflictError(DomainError):
    """The operation conflicts with existing state."""

    default_code = "conflict"


class MergeConflictError(ConflictError):
    """Two condition sets use the same operator and cannot be merged.

    Raised when either side of the colliding operator is still an
    unresolved deferred value.
    """

    default_code = "merge_conflict"
    context_fields = ("operator",)

    def __init__(self, operator: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message
            or f'multiple "{operator}" conditions cannot be merged if one of them '
            "contains an unresolved token",
            **kwargs,
        )
        self.operator = operator


__all__ = [
    "ConflictError",
    "ConstructionError",
    "DomainError",
    "InvariantViolationError",
    "MergeConflictError",
    "ValidationError",
]
