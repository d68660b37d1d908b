"""Principals – PrincipalPolicyFragment and principal-JSON helpers."""

from __future__ import annotations

import dataclasses
import json
from typing import Any

from iam_principals.kernel.conditions import Conditions, copy_conditions
from iam_principals.kernel.errors import ValidationError
from iam_principals.kernel.tokens import DeferredValue, json_default

LITERAL_STRING_KEY = "LiteralString"
"""Principal type marking the bare ``"*"`` principal (rendered without a type key)."""

PrincipalJson = dict[str, list["str | DeferredValue"]]


@dataclasses.dataclass(frozen=True)
class PrincipalPolicyFragment:
    """The fields of a statement that identify a principal.

    ``principal_json`` is the ``Principal`` section, generally
    ``{"<TYPE>": ["ID", ...]}``; ``conditions`` must be applied alongside
    it.  The special bare ``"*"`` principal is represented as
    ``{"LiteralString": ["*"]}``.

    Both mappings are copied on construction, down to the per-type lists
    and per-operator mappings, so a fragment never shares mutable state
    with the principal that produced it or with the caller.
    """

    principal_json: PrincipalJson
    conditions: Conditions = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "principal_json",
            {key: list(values) for key, values in self.principal_json.items()},
        )
        object.__setattr__(self, "conditions", copy_conditions(self.conditions))

    @property
    def has_conditions(self) -> bool:
        return bool(self.conditions)

    def to_dict(self) -> dict[str, Any]:
        return {"principalJson": self.principal_json, "conditions": self.conditions}

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), default=json_default)


def merge_principal(target: PrincipalJson, source: PrincipalJson) -> PrincipalJson:
    """Return *target* extended with the identities of *source*.

    Values are appended per principal type, in order, without
    de-duplication.  A literal-string principal cannot be combined with any
    other principal type.
    """
    source_literal = LITERAL_STRING_KEY in source and any(k != LITERAL_STRING_KEY for k in target)
    target_literal = LITERAL_STRING_KEY in target and any(k != LITERAL_STRING_KEY for k in source)
    if source_literal or target_literal:
        raise ValidationError(
            f"Cannot merge principals {json.dumps(target, default=json_default)} and "
            f"{json.dumps(source, default=json_default)}; if one uses a literal principal "
            "string the other one must be empty"
        )

    merged: PrincipalJson = {key: list(values) for key, values in target.items()}
    for key, value in source.items():
        values = value if isinstance(value, list) else [value]
        merged.setdefault(key, []).extend(values)
    return merged


__all__ = ["LITERAL_STRING_KEY", "PrincipalJson", "PrincipalPolicyFragment", "merge_principal"]
