"""Principals – federated identities (web identity, OpenID Connect, SAML)."""

from __future__ import annotations

from iam_principals.kernel.conditions import Conditions, copy_conditions, merge_conditions
from iam_principals.principals.base import DEFAULT_ASSUME_ROLE_ACTION, PrincipalBase
from iam_principals.principals.fragment import PrincipalPolicyFragment
from iam_principals.principals.providers import OpenIdConnectProvider, SamlProvider

WEB_IDENTITY_ASSUME_ROLE_ACTION = "sts:AssumeRoleWithWebIdentity"
SAML_ASSUME_ROLE_ACTION = "sts:AssumeRoleWithSAML"
SAML_CONSOLE_AUDIENCE = "https://signin.aws.amazon.com/saml"


class FederatedPrincipal(PrincipalBase):
    """A federated identity provider such as Amazon Cognito.

    Users authenticated by the provider receive temporary credentials;
    ``conditions`` restrict which of them the policy applies to.
    """

    def __init__(
        self,
        federated: str,
        conditions: Conditions,
        assume_role_action: str = DEFAULT_ASSUME_ROLE_ACTION,
    ) -> None:
        self.federated = federated
        self.conditions: Conditions = copy_conditions(conditions)
        self._assume_role_action = assume_role_action

    @property
    def assume_role_action(self) -> str:
        return self._assume_role_action

    @property
    def policy_fragment(self) -> PrincipalPolicyFragment:
        return PrincipalPolicyFragment({"Federated": [self.federated]}, self.conditions)

    def __str__(self) -> str:
        return f"FederatedPrincipal({self.federated})"


class WebIdentityPrincipal(FederatedPrincipal):
    """A web identity provider (Cognito, Amazon, Facebook, Google, ...)."""

    def __init__(self, identity_provider: str, conditions: Conditions | None = None) -> None:
        super().__init__(identity_provider, conditions or {}, WEB_IDENTITY_ASSUME_ROLE_ACTION)

    def __str__(self) -> str:
        return f"WebIdentityPrincipal({self.federated})"


class OpenIdConnectPrincipal(WebIdentityPrincipal):
    """An OpenID Connect provider registered in the account."""

    def __init__(self, provider: OpenIdConnectProvider, conditions: Conditions | None = None) -> None:
        super().__init__(provider.open_id_connect_provider_arn, conditions)

    def __str__(self) -> str:
        return f"OpenIdConnectPrincipal({self.federated})"


class SamlPrincipal(FederatedPrincipal):
    """A SAML identity provider."""

    def __init__(self, provider: SamlProvider, conditions: Conditions) -> None:
        super().__init__(provider.saml_provider_arn, conditions, SAML_ASSUME_ROLE_ACTION)

    def __str__(self) -> str:
        return f"SamlPrincipal({self.federated})"


class SamlConsolePrincipal(SamlPrincipal):
    """A SAML identity provider used for programmatic and console sign-in.

    The console audience condition is merged over the caller's
    conditions: a caller-supplied ``SAML:aud`` is always replaced, other
    ``StringEquals`` keys are kept.  A caller ``StringEquals`` that is an
    unresolved deferred value has no keys to merge into, so construction
    raises :class:`~iam_principals.kernel.errors.MergeConflictError`;
    deferred values under any other operator are accepted.
    """

    def __init__(self, provider: SamlProvider, conditions: Conditions | None = None) -> None:
        super().__init__(
            provider,
            merge_conditions(conditions or {}, {"StringEquals": {"SAML:aud": SAML_CONSOLE_AUDIENCE}}),
        )

    def __str__(self) -> str:
        return f"SamlConsolePrincipal({self.federated})"


__all__ = [
    "FederatedPrincipal",
    "OpenIdConnectPrincipal",
    "SAML_ASSUME_ROLE_ACTION",
    "SAML_CONSOLE_AUDIENCE",
    "SamlConsolePrincipal",
    "SamlPrincipal",
    "WEB_IDENTITY_ASSUME_ROLE_ACTION",
    "WebIdentityPrincipal",
]
