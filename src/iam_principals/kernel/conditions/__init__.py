"""Kernel conditions – condition sets and their merge."""
from iam_principals.kernel.conditions.merge import (
    Condition,
    Conditions,
    copy_conditions,
    has_conditions,
    merge_conditions,
)

__all__ = ["Condition", "Conditions", "copy_conditions", "has_conditions", "merge_conditions"]
