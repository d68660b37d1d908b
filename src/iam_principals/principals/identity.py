"""Principals – direct identity variants (ARN, account, service, organization, ...)."""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING

from iam_principals.kernel.conditions import Conditions, copy_conditions
from iam_principals.kernel.errors import ValidationError
from iam_principals.kernel.tokens import DeferredValue, resolve
from iam_principals.principals.base import PrincipalBase
from iam_principals.principals.fragment import LITERAL_STRING_KEY, PrincipalPolicyFragment
from iam_principals.regions import DEFAULT_REGION_FACTS, FactName, RegionFacts, default_service_principal

if TYPE_CHECKING:
    from iam_principals.context import ResolveContext


class ArnPrincipal(PrincipalBase):
    """Principal identified by its ARN (account, user, role, assumed-role session, ...).

    IAM groups and instance profiles cannot be used as principals.
    """

    def __init__(self, arn: str | DeferredValue) -> None:
        self.arn = arn

    @property
    def policy_fragment(self) -> PrincipalPolicyFragment:
        return PrincipalPolicyFragment({"AWS": [self.arn]})

    def __str__(self) -> str:
        return f"ArnPrincipal({self.arn})"


class AccountPrincipal(ArnPrincipal):
    """The root of an AWS account: delegates authority to that account.

    The ARN depends on the partition of the deployment context and is
    therefore a deferred value.
    """

    def __init__(self, account_id: str | DeferredValue) -> None:
        self.account_id = account_id
        super().__init__(
            DeferredValue(
                lambda ctx: f"arn:{ctx.partition}:iam::{resolve(account_id, ctx)}:root",
                display_hint="AccountRootArn",
            )
        )

    @property
    def principal_account(self) -> str | DeferredValue:
        return self.account_id

    def __str__(self) -> str:
        return f"AccountPrincipal({self.account_id})"


def _context_account(ctx: "ResolveContext") -> str:
    if ctx.account is None:
        raise ValidationError("Cannot resolve the account id: the deployment context is account-agnostic")
    return ctx.account


class AccountRootPrincipal(AccountPrincipal):
    """The account the enclosing deployment targets."""

    def __init__(self) -> None:
        super().__init__(DeferredValue(_context_account, display_hint="AccountId"))

    def __str__(self) -> str:
        return "AccountRootPrincipal()"


class ServicePrincipal(PrincipalBase):
    """An AWS service (e.g. ``sqs.amazonaws.com``).

    The service principal name can differ per region, so it is resolved
    from region facts at resolution time.  Passing ``region`` pins the
    lookup to that region instead of the deployment context's.
    """

    def __init__(
        self,
        service: str,
        *,
        region: str | None = None,
        conditions: Conditions | None = None,
        region_facts: RegionFacts | None = None,
    ) -> None:
        self.service = service
        self.region = region
        self.conditions: Conditions = copy_conditions(conditions)
        self._region_facts = DEFAULT_REGION_FACTS if region_facts is None else region_facts
        self._token = DeferredValue(self._resolve_service_principal, display_hint=service)

    def _resolve_service_principal(self, ctx: "ResolveContext") -> str:
        if self.region is not None:
            return self._region_facts.service_principal(self.service, self.region) or default_service_principal(
                self.service, self.region, ctx.url_suffix
            )

        default = default_service_principal(self.service, ctx.region, ctx.url_suffix)
        return ctx.regional_fact(FactName.service_principal(self.service), default) or default

    @property
    def policy_fragment(self) -> PrincipalPolicyFragment:
        return PrincipalPolicyFragment({"Service": [self._token]}, self.conditions)

    def __str__(self) -> str:
        return f"ServicePrincipal({self.service})"


class OrganizationPrincipal(PrincipalBase):
    """All identities of an AWS Organization (e.g. ``o-12345abcde``)."""

    def __init__(self, organization_id: str) -> None:
        self.organization_id = organization_id

    @property
    def policy_fragment(self) -> PrincipalPolicyFragment:
        return PrincipalPolicyFragment(
            {"AWS": ["*"]},
            {"StringEquals": {"aws:PrincipalOrgID": self.organization_id}},
        )

    def __str__(self) -> str:
        return f"OrganizationPrincipal({self.organization_id})"


class CanonicalUserPrincipal(PrincipalBase):
    """A canonical user id, e.g. for S3 bucket policies granting CloudFront origin access identities."""

    def __init__(self, canonical_user_id: str) -> None:
        self.canonical_user_id = canonical_user_id

    @property
    def policy_fragment(self) -> PrincipalPolicyFragment:
        return PrincipalPolicyFragment({"CanonicalUser": [self.canonical_user_id]})

    def __str__(self) -> str:
        return f"CanonicalUserPrincipal({self.canonical_user_id})"


class AnyPrincipal(ArnPrincipal):
    """All AWS identities in all accounts; renders as ``{"AWS": "*"}``.

    Some services treat ``Principal: "*"`` differently; use
    :class:`StarPrincipal` for that form.
    """

    def __init__(self) -> None:
        super().__init__("*")

    def __str__(self) -> str:
        return "AnyPrincipal()"


class Anyone(AnyPrincipal):
    """Deprecated alias of :class:`AnyPrincipal`."""

    def __init__(self) -> None:
        warnings.warn("Anyone is deprecated, use AnyPrincipal", DeprecationWarning, stacklevel=2)
        super().__init__()


class StarPrincipal(PrincipalBase):
    """The literal ``"*"`` principal; renders as ``Principal: "*"``."""

    @property
    def policy_fragment(self) -> PrincipalPolicyFragment:
        return PrincipalPolicyFragment({LITERAL_STRING_KEY: ["*"]})

    def __str__(self) -> str:
        return "StarPrincipal()"


__all__ = [
    "AccountPrincipal",
    "AccountRootPrincipal",
    "AnyPrincipal",
    "Anyone",
    "ArnPrincipal",
    "CanonicalUserPrincipal",
    "OrganizationPrincipal",
    "ServicePrincipal",
    "StarPrincipal",
]
