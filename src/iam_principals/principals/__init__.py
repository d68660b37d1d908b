"""Principals – identities that permissions can be granted to.

Import path convention::

    from iam_principals.principals import ServicePrincipal, CompositePrincipal
"""
from iam_principals.principals.adapters import (
    SESSION_TAGGING_ACTION,
    PrincipalAdapter,
    PrincipalWithConditions,
    SessionTagsPrincipal,
)
from iam_principals.principals.base import (
    DEFAULT_ASSUME_ROLE_ACTION,
    AddToPrincipalPolicyResult,
    IAssumeRolePrincipal,
    IPrincipal,
    PrincipalBase,
    add_principal_to_assume_role,
)
from iam_principals.principals.composite import CompositePrincipal
from iam_principals.principals.federated import (
    SAML_ASSUME_ROLE_ACTION,
    SAML_CONSOLE_AUDIENCE,
    WEB_IDENTITY_ASSUME_ROLE_ACTION,
    FederatedPrincipal,
    OpenIdConnectPrincipal,
    SamlConsolePrincipal,
    SamlPrincipal,
    WebIdentityPrincipal,
)
from iam_principals.principals.fragment import (
    LITERAL_STRING_KEY,
    PrincipalJson,
    PrincipalPolicyFragment,
    merge_principal,
)
from iam_principals.principals.identity import (
    AccountPrincipal,
    AccountRootPrincipal,
    AnyPrincipal,
    Anyone,
    ArnPrincipal,
    CanonicalUserPrincipal,
    OrganizationPrincipal,
    ServicePrincipal,
    StarPrincipal,
)
from iam_principals.principals.providers import OpenIdConnectProvider, SamlProvider

__all__ = [
    "AccountPrincipal",
    "AccountRootPrincipal",
    "AddToPrincipalPolicyResult",
    "AnyPrincipal",
    "Anyone",
    "ArnPrincipal",
    "CanonicalUserPrincipal",
    "CompositePrincipal",
    "DEFAULT_ASSUME_ROLE_ACTION",
    "FederatedPrincipal",
    "IAssumeRolePrincipal",
    "IPrincipal",
    "LITERAL_STRING_KEY",
    "OpenIdConnectPrincipal",
    "OpenIdConnectProvider",
    "OrganizationPrincipal",
    "PrincipalAdapter",
    "PrincipalBase",
    "PrincipalJson",
    "PrincipalPolicyFragment",
    "PrincipalWithConditions",
    "SAML_ASSUME_ROLE_ACTION",
    "SAML_CONSOLE_AUDIENCE",
    "SESSION_TAGGING_ACTION",
    "SamlConsolePrincipal",
    "SamlPrincipal",
    "SamlProvider",
    "ServicePrincipal",
    "SessionTagsPrincipal",
    "StarPrincipal",
    "WEB_IDENTITY_ASSUME_ROLE_ACTION",
    "WebIdentityPrincipal",
    "add_principal_to_assume_role",
    "merge_principal",
]
