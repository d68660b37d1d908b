"""Testing support – fakes and property-based generators.

Import in tests::

    from iam_principals.testing import FakeSamlProvider, static_context
"""

from iam_principals.testing.fakes import (
    FakeOpenIdConnectProvider,
    FakeSamlProvider,
    static_context,
)
from iam_principals.testing.generators import (
    condition_set_strategy,
    condition_value_strategy,
    operator_strategy,
)

__all__ = [
    "FakeOpenIdConnectProvider",
    "FakeSamlProvider",
    "condition_set_strategy",
    "condition_value_strategy",
    "operator_strategy",
    "static_context",
]
