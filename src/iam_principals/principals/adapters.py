"""Principals – adapters that decorate another principal.

An adapter owns exactly one reference to the principal it wraps and
forwards every capability it does not change.  Adapters never mutate the
wrapped principal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from iam_principals.kernel.conditions import Condition, Conditions, copy_conditions, merge_conditions
from iam_principals.kernel.tokens import DeferredValue
from iam_principals.principals.base import (
    AddToPrincipalPolicyResult,
    IPrincipal,
    PrincipalBase,
    add_principal_to_assume_role,
)
from iam_principals.principals.fragment import PrincipalPolicyFragment

if TYPE_CHECKING:
    from iam_principals.policy import IPolicyDocument, PolicyStatement

SESSION_TAGGING_ACTION = "sts:TagSession"


class PrincipalAdapter(PrincipalBase):
    """Base class for principals that wrap another principal."""

    def __init__(self, wrapped: IPrincipal) -> None:
        self._wrapped = wrapped

    @property
    def wrapped(self) -> IPrincipal:
        return self._wrapped

    @property
    def assume_role_action(self) -> str:
        return self._wrapped.assume_role_action

    @property
    def principal_account(self) -> str | DeferredValue | None:
        return self._wrapped.principal_account

    @property
    def policy_fragment(self) -> PrincipalPolicyFragment:
        return self._wrapped.policy_fragment

    def add_to_policy(self, statement: "PolicyStatement") -> bool:
        return self._wrapped.add_to_policy(statement)

    def add_to_principal_policy(self, statement: "PolicyStatement") -> AddToPrincipalPolicyResult:
        return self._wrapped.add_to_principal_policy(statement)

    def __str__(self) -> str:
        return str(self._wrapped)


class PrincipalWithConditions(PrincipalAdapter):
    """A principal with additional conditions restricting when the policy applies.

    The extra conditions are overlaid on the wrapped principal's own
    conditions: for the same operator and key, the value added here wins.

    Conditions added with :meth:`add_condition` / :meth:`add_conditions`
    accumulate in place; the instance expects a single writer.
    """

    def __init__(self, principal: IPrincipal, conditions: Conditions) -> None:
        super().__init__(principal)
        self._additional_conditions: Conditions = copy_conditions(conditions)

    def add_condition(self, operator: str, value: Condition) -> None:
        """Add a condition; keys already set for *operator* are overwritten."""
        self._additional_conditions = merge_conditions(self._additional_conditions, {operator: value})

    def add_conditions(self, conditions: Conditions) -> None:
        """Add several conditions; existing values for the same operator and key are overwritten."""
        for operator, value in conditions.items():
            self.add_condition(operator, value)

    @property
    def conditions(self) -> Conditions:
        """The wrapped principal's conditions merged with the ones added here."""
        return merge_conditions(self._wrapped.policy_fragment.conditions, self._additional_conditions)

    @property
    def policy_fragment(self) -> PrincipalPolicyFragment:
        fragment = self._wrapped.policy_fragment
        return PrincipalPolicyFragment(
            fragment.principal_json,
            merge_conditions(fragment.conditions, self._additional_conditions),
        )


class SessionTagsPrincipal(PrincipalAdapter):
    """Enables session tags on role assumptions by the wrapped principal.

    Only the assume-role attachment changes: every statement generated for
    the wrapped principal also allows ``sts:TagSession``.
    """

    def add_to_assume_role_policy(self, document: "IPolicyDocument") -> None:
        from iam_principals.policy import MutatingPolicyDocumentAdapter

        def _allow_tag_session(statement: "PolicyStatement") -> "PolicyStatement":
            statement.add_actions(SESSION_TAGGING_ACTION)
            return statement

        add_principal_to_assume_role(
            self._wrapped,
            MutatingPolicyDocumentAdapter(document, _allow_tag_session),
        )


__all__ = [
    "PrincipalAdapter",
    "PrincipalWithConditions",
    "SESSION_TAGGING_ACTION",
    "SessionTagsPrincipal",
]
