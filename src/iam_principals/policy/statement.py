"""Policy – PolicyStatement.

A deliberately small statement container: enough to attach principals,
actions and conditions and to render the statement as policy JSON.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Iterable

from iam_principals.kernel.conditions import Condition, Conditions, copy_conditions, merge_conditions
from iam_principals.principals.fragment import LITERAL_STRING_KEY, PrincipalJson, merge_principal

if TYPE_CHECKING:
    from iam_principals.principals.base import IPrincipal


class Effect(str, Enum):
    ALLOW = "Allow"
    DENY = "Deny"


class PolicyStatement:
    """Single statement of a policy document."""

    def __init__(
        self,
        *,
        actions: Iterable[str] | None = None,
        principals: Iterable["IPrincipal"] | None = None,
        conditions: Conditions | None = None,
        resources: Iterable[str] | None = None,
        effect: Effect = Effect.ALLOW,
        sid: str | None = None,
    ) -> None:
        self.effect = effect
        self.sid = sid
        self._actions: list[str] = []
        self._resources: list[str] = []
        self._principal: PrincipalJson = {}
        self._conditions: Conditions = {}

        self.add_actions(*(actions or ()))
        self.add_resources(*(resources or ()))
        self.add_principals(*(principals or ()))
        self.add_conditions(conditions or {})

    @property
    def actions(self) -> list[str]:
        return list(self._actions)

    @property
    def resources(self) -> list[str]:
        return list(self._resources)

    @property
    def principal_json(self) -> PrincipalJson:
        return {key: list(values) for key, values in self._principal.items()}

    @property
    def conditions(self) -> Conditions:
        return copy_conditions(self._conditions)

    @property
    def has_principal(self) -> bool:
        return bool(self._principal)

    def add_actions(self, *actions: str) -> None:
        self._actions.extend(actions)

    def add_resources(self, *resources: str) -> None:
        self._resources.extend(resources)

    def add_principals(self, *principals: "IPrincipal") -> None:
        """Add each principal's identity and its conditions to this statement."""
        for principal in principals:
            fragment = principal.policy_fragment
            self._principal = merge_principal(self._principal, fragment.principal_json)
            self.add_conditions(fragment.conditions)

    def add_condition(self, operator: str, value: Condition) -> None:
        self.add_conditions({operator: value})

    def add_conditions(self, conditions: Conditions) -> None:
        self._conditions = merge_conditions(self._conditions, conditions)

    def to_statement_json(self) -> dict[str, Any]:
        """Render as policy JSON.

        Single-element lists collapse to scalars, empty sections are omitted
        and a literal-string principal renders as the bare string.
        """
        statement: dict[str, Any] = {}
        actions = _norm(list(dict.fromkeys(self._actions)))
        if actions is not None:
            statement["Action"] = actions
        if self.sid is not None:
            statement["Sid"] = self.sid
        statement["Effect"] = self.effect.value
        principal = _norm_principal(self._principal)
        if principal is not None:
            statement["Principal"] = principal
        resources = _norm(list(dict.fromkeys(self._resources)))
        if resources is not None:
            statement["Resource"] = resources
        if self._conditions:
            statement["Condition"] = copy_conditions(self._conditions)
        return statement

    def __repr__(self) -> str:
        return f"PolicyStatement({self.to_statement_json()!r})"


def _norm(values: list[Any]) -> Any:
    if not values:
        return None
    if len(values) == 1:
        return values[0]
    return values


def _norm_principal(principal: PrincipalJson) -> Any:
    if not principal:
        return None
    if LITERAL_STRING_KEY in principal:
        return principal[LITERAL_STRING_KEY][0]
    rendered: dict[str, Any] = {}
    for key, values in principal.items():
        norm = _norm(list(values))
        if norm is not None:
            rendered[key] = norm
    return rendered


__all__ = ["Effect", "PolicyStatement"]
