"""Principals – IPrincipal capability and the PrincipalBase default implementation."""

from __future__ import annotations

import abc
import dataclasses
import json
import warnings
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from iam_principals.kernel.conditions import Conditions
from iam_principals.kernel.tokens import DeferredValue, json_default
from iam_principals.observability.logging import get_logger
from iam_principals.principals.fragment import PrincipalJson, PrincipalPolicyFragment

if TYPE_CHECKING:
    from iam_principals.policy import IPolicyDocument, PolicyStatement
    from iam_principals.principals.adapters import PrincipalWithConditions, SessionTagsPrincipal

logger = get_logger(__name__)

DEFAULT_ASSUME_ROLE_ACTION = "sts:AssumeRole"


@dataclasses.dataclass(frozen=True)
class AddToPrincipalPolicyResult:
    """Result of :meth:`IPrincipal.add_to_principal_policy`.

    ``policy_dependable`` is whatever the identity exposes to depend on the
    policy change; only meaningful when ``statement_added`` is true.
    """

    statement_added: bool
    policy_dependable: Any = None


@runtime_checkable
class IPrincipal(Protocol):
    """Port: a logical principal that permissions can be granted to."""

    @property
    def grant_principal(self) -> "IPrincipal": ...

    @property
    def assume_role_action(self) -> str: ...

    @property
    def policy_fragment(self) -> PrincipalPolicyFragment: ...

    @property
    def principal_account(self) -> "str | DeferredValue | None": ...

    def add_to_policy(self, statement: "PolicyStatement") -> bool: ...

    def add_to_principal_policy(self, statement: "PolicyStatement") -> AddToPrincipalPolicyResult: ...


@runtime_checkable
class IAssumeRolePrincipal(IPrincipal, Protocol):
    """Principal that controls its own representation in an assume-role document."""

    def add_to_assume_role_policy(self, document: "IPolicyDocument") -> None: ...


class PrincipalBase(abc.ABC):
    """Default-implementing base for principals.

    Subclasses only have to provide :attr:`policy_fragment`.  Non-identity
    principals have no policy of their own, so
    :meth:`add_to_principal_policy` reports ``statement_added=False``.
    """

    @property
    def grant_principal(self) -> IPrincipal:
        return self

    @property
    def assume_role_action(self) -> str:
        """Action used when this principal appears in an assume-role policy."""
        return DEFAULT_ASSUME_ROLE_ACTION

    @property
    def principal_account(self) -> str | DeferredValue | None:
        """Account of this principal; ``None`` when not known (e.g. services)."""
        return None

    @property
    @abc.abstractmethod
    def policy_fragment(self) -> PrincipalPolicyFragment: ...

    def add_to_policy(self, statement: "PolicyStatement") -> bool:
        """Deprecated: use :meth:`add_to_principal_policy`."""
        warnings.warn(
            "add_to_policy() is deprecated, use add_to_principal_policy()",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.add_to_principal_policy(statement).statement_added

    def add_to_principal_policy(self, statement: "PolicyStatement") -> AddToPrincipalPolicyResult:  # noqa: ARG002
        return AddToPrincipalPolicyResult(statement_added=False)

    def add_to_assume_role_policy(self, document: "IPolicyDocument") -> None:
        """Add one statement granting :attr:`assume_role_action` to this principal."""
        from iam_principals.policy import PolicyStatement

        document.add_statements(
            PolicyStatement(actions=[self.assume_role_action], principals=[self])
        )
        logger.debug("assume_role.statement_added", principal=str(self), action=self.assume_role_action)

    def with_conditions(self, conditions: Conditions) -> "PrincipalWithConditions":
        """Return a new principal based on this one with *conditions* added.

        Where this principal and *conditions* both set a value for the same
        operator and key, the value from *conditions* wins.
        """
        from iam_principals.principals.adapters import PrincipalWithConditions

        return PrincipalWithConditions(self, conditions)

    def with_session_tags(self) -> "SessionTagsPrincipal":
        """Return a new principal based on this one with session tags enabled."""
        from iam_principals.principals.adapters import SessionTagsPrincipal

        return SessionTagsPrincipal(self)

    def to_json(self) -> PrincipalJson:
        return self.policy_fragment.principal_json

    def __str__(self) -> str:
        return json.dumps(self.policy_fragment.principal_json, default=json_default)


def add_principal_to_assume_role(principal: IPrincipal, document: "IPolicyDocument") -> None:
    """Add *principal* to an assume-role *document*.

    Principals that know how to attach themselves are asked to do so;
    anything else gets the single default statement.
    """
    add_to_assume_role_policy = getattr(principal, "add_to_assume_role_policy", None)
    if callable(add_to_assume_role_policy):
        add_to_assume_role_policy(document)
        return

    from iam_principals.policy import PolicyStatement

    document.add_statements(
        PolicyStatement(actions=[principal.assume_role_action], principals=[principal])
    )


__all__ = [
    "AddToPrincipalPolicyResult",
    "DEFAULT_ASSUME_ROLE_ACTION",
    "IAssumeRolePrincipal",
    "IPrincipal",
    "PrincipalBase",
    "add_principal_to_assume_role",
]
