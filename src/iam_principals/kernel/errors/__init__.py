"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── InvariantViolationError
    │   │   └── ConstructionError
    │   ├── ValidationError
    │   └── ConflictError
    │       └── MergeConflictError
    └── ApplicationError     (application.py)
        └── ConfigError      (config.validation)
"""

from iam_principals.kernel.errors.application import ApplicationError
from iam_principals.kernel.errors.base import BaseError
from iam_principals.kernel.errors.domain import (
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
