"""Observability – get_logger helper and structlog processors."""
from __future__ import annotations

from typing import Any

import structlog


def render_deferred_values(
    logger: Any,           # noqa: ARG001
    method_name: str,      # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog processor that renders top-level values exposing ``to_json()``.

    Deferred values and principals bound to an event before resolution are
    replaced with their placeholder so log lines stay JSON-renderable.
    """
    for key, value in list(event_dict.items()):
        if callable(getattr(value, "to_json", None)):
            event_dict[key] = value.to_json()
    return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["get_logger", "render_deferred_values"]
