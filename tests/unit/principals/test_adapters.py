"""Unit tests for principal adapters (conditions, session tags)."""

from __future__ import annotations

import pytest

from iam_principals.kernel.errors import MergeConflictError
from iam_principals.kernel.tokens import DeferredValue
from iam_principals.policy import PolicyDocument, PolicyStatement
from iam_principals.principals import (
    SESSION_TAGGING_ACTION,
    AccountPrincipal,
    AddToPrincipalPolicyResult,
    ArnPrincipal,
    FederatedPrincipal,
    OrganizationPrincipal,
    PrincipalAdapter,
    PrincipalBase,
    PrincipalPolicyFragment,
    PrincipalWithConditions,
    ServicePrincipal,
    SessionTagsPrincipal,
    WebIdentityPrincipal,
)


class RecordingPrincipal(PrincipalBase):
    """Principal with its own policy, recording statements added to it."""

    def __init__(self) -> None:
        self.statements: list[PolicyStatement] = []

    @property
    def policy_fragment(self) -> PrincipalPolicyFragment:
        return PrincipalPolicyFragment({"AWS": ["arn:aws:iam::123456789012:role/recorder"]})

    def add_to_principal_policy(self, statement: PolicyStatement) -> AddToPrincipalPolicyResult:
        self.statements.append(statement)
        return AddToPrincipalPolicyResult(statement_added=True, policy_dependable="policy")


class TestPrincipalAdapter:
    def test_forwards_identity_and_action(self) -> None:
        wrapped = WebIdentityPrincipal("accounts.google.com")
        adapter = PrincipalAdapter(wrapped)
        assert adapter.wrapped is wrapped
        assert adapter.assume_role_action == wrapped.assume_role_action
        assert adapter.policy_fragment == wrapped.policy_fragment
        assert str(adapter) == str(wrapped)

    def test_forwards_principal_account(self) -> None:
        assert PrincipalAdapter(AccountPrincipal("123456789012")).principal_account == "123456789012"

    def test_forwards_add_to_principal_policy(self) -> None:
        wrapped = RecordingPrincipal()
        statement = PolicyStatement(actions=["s3:GetObject"])
        result = PrincipalAdapter(wrapped).add_to_principal_policy(statement)
        assert result.statement_added is True
        assert result.policy_dependable == "policy"
        assert wrapped.statements == [statement]


class TestPrincipalWithConditions:
    def test_merges_on_top_of_wrapped_conditions(self) -> None:
        p = PrincipalWithConditions(
            OrganizationPrincipal("o-1"),
            {"StringEquals": {"aws:SourceAccount": "123"}, "Bool": {"aws:SecureTransport": "true"}},
        )
        assert p.policy_fragment.conditions == {
            "StringEquals": {"aws:PrincipalOrgID": "o-1", "aws:SourceAccount": "123"},
            "Bool": {"aws:SecureTransport": "true"},
        }
        assert p.conditions == p.policy_fragment.conditions

    def test_own_conditions_win_on_collision(self) -> None:
        p = PrincipalWithConditions(OrganizationPrincipal("o-1"), {"StringEquals": {"aws:PrincipalOrgID": "o-2"}})
        assert p.policy_fragment.conditions == {"StringEquals": {"aws:PrincipalOrgID": "o-2"}}

    def test_identity_delegated_unchanged(self) -> None:
        wrapped = ArnPrincipal("arn:aws:iam::123456789012:role/r")
        p = PrincipalWithConditions(wrapped, {"Bool": {"k": "v"}})
        assert p.policy_fragment.principal_json == wrapped.policy_fragment.principal_json

    def test_add_condition_overwrites_same_key(self) -> None:
        p = PrincipalWithConditions(ArnPrincipal("arn"), {"StringEquals": {"k": "v1"}})
        p.add_condition("StringEquals", {"k": "v2"})
        assert p.policy_fragment.conditions == {"StringEquals": {"k": "v2"}}

    def test_add_condition_extends_operator(self) -> None:
        p = PrincipalWithConditions(ArnPrincipal("arn"), {"StringEquals": {"a": "1"}})
        p.add_condition("StringEquals", {"b": "2"})
        p.add_condition("Bool", {"c": "true"})
        assert p.policy_fragment.conditions == {"StringEquals": {"a": "1", "b": "2"}, "Bool": {"c": "true"}}

    def test_add_conditions(self) -> None:
        p = PrincipalWithConditions(ArnPrincipal("arn"), {})
        p.add_conditions({"StringEquals": {"a": "1"}, "StringLike": {"b": "x*"}})
        p.add_conditions({"StringEquals": {"a": "2"}})
        assert p.policy_fragment.conditions == {"StringEquals": {"a": "2"}, "StringLike": {"b": "x*"}}

    def test_caller_mapping_not_mutated(self) -> None:
        conditions = {"StringEquals": {"k": "v1"}}
        p = PrincipalWithConditions(ArnPrincipal("arn"), conditions)
        p.add_condition("StringEquals", {"k": "v2"})
        assert conditions == {"StringEquals": {"k": "v1"}}

    def test_later_caller_mutation_not_seen(self) -> None:
        conditions = {"StringEquals": {"k": "v"}}
        p = PrincipalWithConditions(ArnPrincipal("arn"), conditions)
        conditions["StringEquals"]["k"] = "changed"
        assert p.policy_fragment.conditions == {"StringEquals": {"k": "v"}}

    def test_conditions_view_is_a_copy(self) -> None:
        p = PrincipalWithConditions(ArnPrincipal("arn"), {"StringEquals": {"k": "v"}})
        p.conditions["StringEquals"]["k"] = "changed"
        p.policy_fragment.conditions["StringEquals"]["k"] = "changed"
        assert p.policy_fragment.conditions == {"StringEquals": {"k": "v"}}

    def test_wrapped_principal_not_mutated(self) -> None:
        wrapped = FederatedPrincipal("idp", {"StringEquals": {"a": "1"}})
        PrincipalWithConditions(wrapped, {"StringEquals": {"b": "2"}}).policy_fragment
        assert wrapped.policy_fragment.conditions == {"StringEquals": {"a": "1"}}

    def test_deferred_collision_fails_at_fragment_time(self) -> None:
        wrapped = FederatedPrincipal("idp", {"StringEquals": DeferredValue(lambda c: {"a": "1"})})
        p = PrincipalWithConditions(wrapped, {"StringEquals": {"b": "2"}})
        with pytest.raises(MergeConflictError):
            p.policy_fragment

    def test_deferred_on_distinct_operator_is_fine(self) -> None:
        token = DeferredValue(lambda c: {"a": "1"})
        p = PrincipalWithConditions(FederatedPrincipal("idp", {"StringLike": token}), {"StringEquals": {"b": "2"}})
        assert p.policy_fragment.conditions["StringLike"] is token

    def test_nested_adapters(self) -> None:
        inner = PrincipalWithConditions(ArnPrincipal("arn"), {"StringEquals": {"a": "1"}})
        outer = PrincipalWithConditions(inner, {"StringEquals": {"a": "2", "b": "3"}})
        assert outer.policy_fragment.conditions == {"StringEquals": {"a": "2", "b": "3"}}
        assert inner.policy_fragment.conditions == {"StringEquals": {"a": "1"}}

    def test_add_to_assume_role_policy_uses_merged_fragment(self) -> None:
        doc = PolicyDocument()
        p = PrincipalWithConditions(ServicePrincipal("lambda.amazonaws.com"), {"StringEquals": {"aws:SourceAccount": "1"}})
        p.add_to_assume_role_policy(doc)
        [statement] = doc.statements
        assert statement.actions == ["sts:AssumeRole"]
        assert statement.conditions == {"StringEquals": {"aws:SourceAccount": "1"}}

    def test_keeps_wrapped_assume_role_action(self) -> None:
        p = PrincipalWithConditions(WebIdentityPrincipal("idp"), {})
        assert p.assume_role_action == "sts:AssumeRoleWithWebIdentity"


class TestSessionTagsPrincipal:
    def test_fragment_unchanged(self) -> None:
        wrapped = ArnPrincipal("arn:aws:iam::123456789012:role/r")
        assert SessionTagsPrincipal(wrapped).policy_fragment == wrapped.policy_fragment

    def test_assume_role_statement_also_allows_tag_session(self) -> None:
        doc = PolicyDocument()
        SessionTagsPrincipal(ArnPrincipal("arn:aws:iam::123456789012:role/r")).add_to_assume_role_policy(doc)
        [statement] = doc.statements
        assert statement.actions == ["sts:AssumeRole", SESSION_TAGGING_ACTION]
        assert statement.principal_json == {"AWS": ["arn:aws:iam::123456789012:role/r"]}

    def test_uses_wrapped_assume_role_action(self) -> None:
        doc = PolicyDocument()
        WebIdentityPrincipal("idp").with_session_tags().add_to_assume_role_policy(doc)
        assert doc.statements[0].actions == ["sts:AssumeRoleWithWebIdentity", SESSION_TAGGING_ACTION]

    def test_session_tags_over_conditions_keeps_conditions(self) -> None:
        doc = PolicyDocument()
        p = ArnPrincipal("arn").with_conditions({"Bool": {"k": "v"}}).with_session_tags()
        p.add_to_assume_role_policy(doc)
        [statement] = doc.statements
        assert statement.conditions == {"Bool": {"k": "v"}}
        assert SESSION_TAGGING_ACTION in statement.actions
