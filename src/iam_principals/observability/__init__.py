"""Observability – structured logging."""
from iam_principals.observability.logging import JsonLoggerFactory, configure_logging, get_logger

__all__ = ["JsonLoggerFactory", "configure_logging", "get_logger"]
