"""Testing generators – Hypothesis strategies for condition sets."""
from iam_principals.testing.generators.strategies import (
    condition_set_strategy,
    condition_value_strategy,
    operator_strategy,
)

__all__ = ["condition_set_strategy", "condition_value_strategy", "operator_strategy"]
