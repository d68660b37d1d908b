"""Kernel – framework-agnostic building blocks: errors, deferred values, conditions."""

from iam_principals.kernel.errors import (
    ApplicationError,
    BaseError,
    ConflictError,
    ConstructionError,
    DomainError,
    InvariantViolationError,
    MergeConflictError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "ConstructionError",
    "DomainError",
    "InvariantViolationError",
    "MergeConflictError",
    "ValidationError",
]
