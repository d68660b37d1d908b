"""Policy – minimal statement and document containers used by principals."""
from iam_principals.policy.document import (
    POLICY_VERSION,
    IPolicyDocument,
    MutatingPolicyDocumentAdapter,
    PolicyDocument,
)
from iam_principals.policy.statement import Effect, PolicyStatement

__all__ = [
    "Effect",
    "IPolicyDocument",
    "MutatingPolicyDocumentAdapter",
    "POLICY_VERSION",
    "PolicyDocument",
    "PolicyStatement",
]
