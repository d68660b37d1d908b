"""Regions – service-principal facts per region."""
from iam_principals.regions.defaults import default_service_principal
from iam_principals.regions.facts import DEFAULT_REGION_FACTS, FactName, InMemoryRegionFacts, RegionFacts

__all__ = [
    "DEFAULT_REGION_FACTS",
    "FactName",
    "InMemoryRegionFacts",
    "RegionFacts",
    "default_service_principal",
]
