"""Policy – PolicyDocument port, PolicyDocument and MutatingPolicyDocumentAdapter."""

from __future__ import annotations

from typing import Any, Callable, Protocol

from iam_principals.policy.statement import PolicyStatement

POLICY_VERSION = "2012-10-17"


class IPolicyDocument(Protocol):
    """Port: anything statements can be added to."""

    def add_statements(self, *statements: PolicyStatement) -> None: ...


class PolicyDocument:
    """Ordered collection of :class:`PolicyStatement`\\ s."""

    def __init__(self, statements: list[PolicyStatement] | None = None) -> None:
        self._statements: list[PolicyStatement] = list(statements or [])

    @property
    def statements(self) -> list[PolicyStatement]:
        return list(self._statements)

    @property
    def is_empty(self) -> bool:
        return not self._statements

    @property
    def statement_count(self) -> int:
        return len(self._statements)

    def add_statements(self, *statements: PolicyStatement) -> None:
        self._statements.extend(statements)

    def to_json(self) -> dict[str, Any]:
        return {
            "Version": POLICY_VERSION,
            "Statement": [s.to_statement_json() for s in self._statements],
        }


class MutatingPolicyDocumentAdapter:
    """Document wrapper that passes every statement through *fn* before adding it.

    Example::

        adapter = MutatingPolicyDocumentAdapter(doc, lambda s: (s.add_actions("sts:TagSession"), s)[1])
    """

    def __init__(
        self,
        wrapped: IPolicyDocument,
        fn: Callable[[PolicyStatement], PolicyStatement],
    ) -> None:
        self._wrapped = wrapped
        self._fn = fn

    def add_statements(self, *statements: PolicyStatement) -> None:
        for statement in statements:
            self._wrapped.add_statements(self._fn(statement))


__all__ = ["IPolicyDocument", "MutatingPolicyDocumentAdapter", "POLICY_VERSION", "PolicyDocument"]
