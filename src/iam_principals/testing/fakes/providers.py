"""Testing fakes – identity providers and a static deployment context."""
from __future__ import annotations

import dataclasses

from iam_principals.context import DeploymentContext
from iam_principals.regions import InMemoryRegionFacts, RegionFacts


@dataclasses.dataclass(frozen=True)
class FakeSamlProvider:
    """SAML provider double exposing a fixed ARN."""

    saml_provider_arn: str = "arn:aws:iam::123456789012:saml-provider/test-idp"


@dataclasses.dataclass(frozen=True)
class FakeOpenIdConnectProvider:
    """OpenID Connect provider double exposing a fixed ARN."""

    open_id_connect_provider_arn: str = (
        "arn:aws:iam::123456789012:oidc-provider/oidc.example.com"
    )


def static_context(
    *,
    partition: str = "aws",
    account: str | None = "123456789012",
    region: str | None = "us-east-1",
    url_suffix: str = "amazonaws.com",
    facts: RegionFacts | None = None,
) -> DeploymentContext:
    """Return a :class:`DeploymentContext` with its own empty fact registry by default."""
    return DeploymentContext(
        partition=partition,
        account=account,
        region=region,
        url_suffix=url_suffix,
        facts=InMemoryRegionFacts() if facts is None else facts,
    )


__all__ = ["FakeOpenIdConnectProvider", "FakeSamlProvider", "static_context"]
