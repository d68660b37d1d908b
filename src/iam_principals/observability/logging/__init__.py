"""Observability – structured logging helpers."""
from iam_principals.observability.logging.factory import JsonLoggerFactory, configure_logging
from iam_principals.observability.logging.processors import get_logger, render_deferred_values

__all__ = [
    "JsonLoggerFactory",
    "configure_logging",
    "get_logger",
    "render_deferred_values",
]
