"""
iam_principals – principals for access-control policy statements.

Import path convention::

    from iam_principals.principals import ServicePrincipal, CompositePrincipal
    from iam_principals.kernel.conditions import merge_conditions
    from iam_principals.kernel.tokens import DeferredValue, resolve
    from iam_principals.context import DeploymentContext
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
