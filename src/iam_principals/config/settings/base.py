"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import ClassVar

from iam_principals.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for settings read from ``<PREFIX>_<FIELD>`` variables.

    ``_choices`` restricts string fields to a closed set of values
    (``None`` is always accepted); ``_validate`` is the hook for anything
    that needs more than one field.
    """

    _prefix: ClassVar[str] = ""
    _choices: ClassVar[Mapping[str, frozenset[str]]] = {}

    def __post_init__(self) -> None:
        for name, allowed in self._choices.items():
            value = getattr(self, name)
            if value is not None and value not in allowed:
                raise InvalidSettingValueError(name, value, f"must be one of {sorted(allowed)}")
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable holding *field_name* (``IAM_ACCOUNT`` for ``account``)."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")


__all__ = ["Settings"]
