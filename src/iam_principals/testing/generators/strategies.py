"""Testing generators – Hypothesis property-based testing strategies.

Requires the ``hypothesis`` package:

    pip install hypothesis
    # or
    pip install "iam-principals[test]"
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy


def _require_hypothesis() -> Any:
    """Lazy import guard – raises a clear error when hypothesis is absent."""
    try:
        import hypothesis.strategies as st
        return st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use property-based testing strategies: "
            "pip install hypothesis"
        ) from exc


_COMMON_OPERATORS: tuple[str, ...] = (
    "StringEquals",
    "StringLike",
    "StringNotEquals",
    "ArnLike",
    "ArnEquals",
    "Bool",
    "IpAddress",
    "NumericLessThan",
    "DateGreaterThan",
    "ForAnyValue:StringEquals",
)

_COMMON_KEYS: tuple[str, ...] = (
    "aws:PrincipalOrgID",
    "aws:SourceAccount",
    "aws:SourceArn",
    "aws:SourceIp",
    "aws:SecureTransport",
    "aws:RequestTag/team",
    "SAML:aud",
    "sts:ExternalId",
)


def operator_strategy(operators: tuple[str, ...] | list[str] | None = None) -> "SearchStrategy[str]":
    """Hypothesis strategy drawing a condition operator name.

    Example::

        @given(operator_strategy())
        def test_operator_is_known(op):
            assert op
    """
    st = _require_hypothesis()
    return st.sampled_from(list(operators) if operators is not None else list(_COMMON_OPERATORS))


def condition_value_strategy() -> "SearchStrategy[dict[str, Any]]":
    """Strategy for one operator's ``{condition-key: value(s)}`` mapping."""
    st = _require_hypothesis()
    scalar = st.one_of(st.text(min_size=1, max_size=12), st.booleans(), st.integers(0, 10_000))
    value = st.one_of(scalar, st.lists(st.text(min_size=1, max_size=12), min_size=1, max_size=3))
    return st.dictionaries(st.sampled_from(_COMMON_KEYS), value, max_size=4)


def condition_set_strategy(
    operators: tuple[str, ...] | list[str] | None = None,
    *,
    max_operators: int = 4,
) -> "SearchStrategy[dict[str, dict[str, Any]]]":
    """Hypothesis strategy generating condition sets (no deferred values).

    Args:
        operators: operator names to draw from; defaults to common operators.
        max_operators: upper bound on the number of operators per set.

    Example::

        @given(condition_set_strategy(), condition_set_strategy())
        def test_merge_keeps_operators(a, b):
            assert set(merge_conditions(a, b)) == set(a) | set(b)
    """
    st = _require_hypothesis()
    return st.dictionaries(
        operator_strategy(operators),
        condition_value_strategy(),
        max_size=max_operators,
    )


__all__ = ["condition_set_strategy", "condition_value_strategy", "operator_strategy"]
