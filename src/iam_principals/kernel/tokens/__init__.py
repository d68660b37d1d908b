"""Kernel tokens – deferred values and the resolution pass."""
from iam_principals.kernel.tokens.deferred import UNRESOLVED_PLACEHOLDER, DeferredValue, is_unresolved
from iam_principals.kernel.tokens.resolve import json_default, resolve

__all__ = [
    "DeferredValue",
    "UNRESOLVED_PLACEHOLDER",
    "is_unresolved",
    "json_default",
    "resolve",
]
