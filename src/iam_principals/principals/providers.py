"""Principals – identity-provider ports consumed by federated principals."""

from __future__ import annotations

from typing import Protocol


class SamlProvider(Protocol):
    """Port: a SAML identity provider registered in the account."""

    @property
    def saml_provider_arn(self) -> str: ...


class OpenIdConnectProvider(Protocol):
    """Port: an OpenID Connect identity provider registered in the account."""

    @property
    def open_id_connect_provider_arn(self) -> str: ...


__all__ = ["OpenIdConnectProvider", "SamlProvider"]
