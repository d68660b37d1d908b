"""Regions – RegionFacts port, FactName and InMemoryRegionFacts."""

from __future__ import annotations

from typing import Protocol


class FactName:
    """Namespace for well-known fact names."""

    PARTITION = "partition"
    DOMAIN_SUFFIX = "domainSuffix"

    @staticmethod
    def service_principal(service: str) -> str:
        """Fact name for the principal of *service* (e.g. ``"service-principal:sqs"``)."""
        name = service[: -len(".amazonaws.com")] if service.endswith(".amazonaws.com") else service
        return f"service-principal:{name}"


class RegionFacts(Protocol):
    """Port: region/service-fact lookup."""

    def fact(self, region: str, name: str) -> str | None: ...

    def service_principal(self, service: str, region: str) -> str | None: ...


class InMemoryRegionFacts:
    """Simple in-process region → fact registry.

    Intended for tests and small applications.  Facts are registered once
    during start-up and read afterwards.

    Example::

        facts = InMemoryRegionFacts()
        facts.register("cn-north-1", FactName.service_principal("ec2"), "ec2.amazonaws.com.cn")
    """

    def __init__(self) -> None:
        self._facts: dict[str, dict[str, str]] = {}

    def register(self, region: str, name: str, value: str) -> None:
        """Record *value* for fact *name* in *region* (overwrites)."""
        self._facts.setdefault(region, {})[name] = value

    def fact(self, region: str, name: str) -> str | None:
        return self._facts.get(region, {}).get(name)

    def service_principal(self, service: str, region: str) -> str | None:
        return self.fact(region, FactName.service_principal(service))

    def regions(self) -> list[str]:
        """Return the regions that have at least one registered fact."""
        return list(self._facts)


DEFAULT_REGION_FACTS = InMemoryRegionFacts()
"""Process-wide registry used when a principal is not given its own."""


__all__ = ["DEFAULT_REGION_FACTS", "FactName", "InMemoryRegionFacts", "RegionFacts"]
