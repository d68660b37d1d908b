"""Context – deployment scope used by the resolution pass."""
from iam_principals.context.deployment import DeploymentContext, ResolveContext

__all__ = ["DeploymentContext", "ResolveContext"]
