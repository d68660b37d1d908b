"""Unit tests for the Hypothesis strategies shipped in iam_principals.testing."""

from __future__ import annotations

from hypothesis import given

from iam_principals.testing import condition_set_strategy, condition_value_strategy, operator_strategy


class TestOperatorStrategy:
    @given(operator_strategy(["StringEquals", "Bool"]))
    def test_draws_from_given_operators(self, operator: str) -> None:
        assert operator in {"StringEquals", "Bool"}

    @given(operator_strategy())
    def test_default_operators_are_non_empty_strings(self, operator: str) -> None:
        assert isinstance(operator, str) and operator


class TestConditionSetStrategy:
    @given(condition_set_strategy(max_operators=2))
    def test_shape(self, conditions: dict) -> None:
        assert len(conditions) <= 2
        for operator, condition in conditions.items():
            assert isinstance(operator, str)
            assert isinstance(condition, dict)

    @given(condition_value_strategy())
    def test_value_keys_are_strings(self, condition: dict) -> None:
        assert all(isinstance(key, str) for key in condition)
