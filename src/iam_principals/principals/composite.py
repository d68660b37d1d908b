"""Principals – CompositePrincipal."""

from __future__ import annotations

from typing import TYPE_CHECKING

from iam_principals.kernel.errors import ConstructionError, ValidationError
from iam_principals.observability.logging import get_logger
from iam_principals.principals.base import IPrincipal, PrincipalBase, add_principal_to_assume_role
from iam_principals.principals.fragment import PrincipalJson, PrincipalPolicyFragment, merge_principal

if TYPE_CHECKING:
    from iam_principals.policy import IPolicyDocument

logger = get_logger(__name__)


class CompositePrincipal(PrincipalBase):
    """Several principals acting as one logical principal, e.g. multiple services.

    Rendered as a single fragment, the members' identities are unioned per
    principal type, and members must not carry conditions.  Attached to an
    assume-role document, each member gets its own statement instead, so
    member conditions are kept there.
    """

    def __init__(self, *principals: IPrincipal) -> None:
        if not principals:
            raise ConstructionError(
                "CompositePrincipals must be constructed with at least 1 Principal but none were passed."
            )
        self._assume_role_action = principals[0].assume_role_action
        self._principals: list[IPrincipal] = []
        self.add_principals(*principals)

    @property
    def assume_role_action(self) -> str:
        return self._assume_role_action

    @property
    def principals(self) -> tuple[IPrincipal, ...]:
        return tuple(self._principals)

    def add_principals(self, *principals: IPrincipal) -> "CompositePrincipal":
        """Append *principals* (which must not have conditions) and return ``self``."""
        self._principals.extend(principals)
        return self

    def add_to_assume_role_policy(self, document: "IPolicyDocument") -> None:
        for principal in self._principals:
            add_principal_to_assume_role(principal, document)

    @property
    def policy_fragment(self) -> PrincipalPolicyFragment:
        # Only a single-statement rendering has a problem with member conditions.
        fragments = [p.policy_fragment for p in self._principals]
        for principal, fragment in zip(self._principals, fragments):
            if fragment.has_conditions:
                error = ValidationError(
                    "Components of a CompositePrincipal must not have conditions. "
                    f"Tried to add the following fragment: {fragment}",
                    errors=[{"principal": str(principal), "operators": list(fragment.conditions)}],
                )
                logger.warning("composite.rejected_conditions", member=str(principal), **error.to_dict())
                raise error

        principal_json: PrincipalJson = {}
        for fragment in fragments:
            principal_json = merge_principal(principal_json, fragment.principal_json)
        return PrincipalPolicyFragment(principal_json)

    def __str__(self) -> str:
        return f"CompositePrincipal({','.join(str(p) for p in self._principals)})"


__all__ = ["CompositePrincipal"]
