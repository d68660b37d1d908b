"""Context – ResolveContext port and DeploymentContext."""

from __future__ import annotations

import dataclasses
from typing import Protocol

from iam_principals.config.settings import DeploymentSettings
from iam_principals.regions import DEFAULT_REGION_FACTS, RegionFacts


class ResolveContext(Protocol):
    """Port: ambient deployment scope a deferred value is resolved against."""

    @property
    def partition(self) -> str: ...

    @property
    def account(self) -> str | None: ...

    @property
    def region(self) -> str | None: ...

    @property
    def url_suffix(self) -> str: ...

    def regional_fact(self, name: str, default: str | None = None) -> str | None: ...


@dataclasses.dataclass(frozen=True)
class DeploymentContext:
    """Concrete :class:`ResolveContext` for a single account/region pair."""

    partition: str = "aws"
    account: str | None = None
    region: str | None = None
    url_suffix: str = "amazonaws.com"
    facts: RegionFacts = dataclasses.field(default=DEFAULT_REGION_FACTS, compare=False, repr=False)

    def regional_fact(self, name: str, default: str | None = None) -> str | None:
        """Look up *name* for this context's region, falling back to *default*."""
        if self.region is None:
            return default
        value = self.facts.fact(self.region, name)
        return default if value is None else value

    @classmethod
    def from_settings(
        cls,
        settings: DeploymentSettings,
        facts: RegionFacts | None = None,
    ) -> "DeploymentContext":
        return cls(
            partition=settings.partition,
            account=settings.account,
            region=settings.region,
            url_suffix=settings.url_suffix,
            facts=DEFAULT_REGION_FACTS if facts is None else facts,
        )


__all__ = ["DeploymentContext", "ResolveContext"]
