"""Regions – fallback naming rule for service principals.

Used when no explicit fact is registered for a service/region pair.
"""

from __future__ import annotations

_AMAZONAWS_SUFFIX = ".amazonaws.com"

# Services whose principal embeds the region name.
_REGIONAL_SERVICES = frozenset({"states", "logs"})

# Services whose principal embeds the region name and the URL suffix.
_REGIONAL_URL_SUFFIX_SERVICES = frozenset({"codedeploy"})

# Services that use the partition's URL suffix in China regions.
_CHINA_URL_SUFFIX_SERVICES = frozenset({"ec2", "application-autoscaling"})


def default_service_principal(service: str, region: str | None, url_suffix: str = "amazonaws.com") -> str:
    """Return the conventional principal name of *service* in *region*.

    Without a region only the region-agnostic form can be produced.
    *service* may be given either as a short name (``"sqs"``) or as a full
    principal (``"sqs.amazonaws.com"``).  Principals outside the
    ``amazonaws.com`` domain are returned unchanged.
    """
    if service.endswith(_AMAZONAWS_SUFFIX):
        name = service[: -len(_AMAZONAWS_SUFFIX)]
    elif "." in service:
        return service
    else:
        name = service

    if region is None:
        return f"{name}.amazonaws.com"
    if name in _REGIONAL_SERVICES:
        return f"{name}.{region}.amazonaws.com"
    if name in _REGIONAL_URL_SUFFIX_SERVICES:
        return f"{name}.{region}.{url_suffix}"
    if name in _CHINA_URL_SUFFIX_SERVICES and region.startswith("cn-"):
        return f"{name}.{url_suffix}"
    return f"{name}.amazonaws.com"


__all__ = ["default_service_principal"]
