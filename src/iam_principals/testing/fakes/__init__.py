"""Testing fakes – in-memory doubles for principal collaborators."""
from iam_principals.testing.fakes.providers import (
    FakeOpenIdConnectProvider,
    FakeSamlProvider,
    static_context,
)

__all__ = ["FakeOpenIdConnectProvider", "FakeSamlProvider", "static_context"]
