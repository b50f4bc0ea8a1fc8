"""Unit tests for domain entities and value objects."""

import pytest

from nodeguard.domain.entities import Actor
from nodeguard.domain.exceptions import ValidationError
from nodeguard.domain.value_objects import (
    MAX_NODE_LENGTH,
    Decision,
    RoleSubject,
    SubjectType,
    UserSubject,
    make_subject,
    validate_node,
)

from tests.conftest import role_record


class TestActor:
    """Tests for Actor construction."""

    def test_member_appends_scope_as_default_role(self) -> None:
        actor = Actor.member("u1", "g1", ["R1", "R2"])
        assert actor.role_ids == ("R1", "R2", "g1")
        assert actor.scope == "g1"

    def test_member_accepts_any_iterable_of_roles(self) -> None:
        actor = Actor.member("u1", "g1", (r for r in ["R1"]))
        assert actor.role_ids == ("R1", "g1")

    def test_member_does_not_duplicate_scope_role(self) -> None:
        actor = Actor.member("u1", "g1", ["g1", "R1"])
        assert actor.role_ids == ("g1", "R1")

    def test_direct_has_no_roles_or_scope(self) -> None:
        actor = Actor.direct("u1")
        assert actor.role_ids == ()
        assert actor.scope is None


class TestSubject:
    """Tests for subject variants."""

    def test_make_subject(self) -> None:
        assert make_subject("role", "R1") == RoleSubject("R1")
        assert make_subject("user", "u1") == UserSubject("u1")

    def test_make_subject_unknown_type(self) -> None:
        with pytest.raises(ValueError):
            make_subject("group", "x")

    def test_role_and_user_with_same_id_differ(self) -> None:
        assert RoleSubject("1") != UserSubject("1")
        assert RoleSubject("1").type is SubjectType.ROLE
        assert UserSubject("1").type is SubjectType.USER


class TestDecision:
    def test_from_allowed(self) -> None:
        assert Decision.from_allowed(True) is Decision.ALLOW
        assert Decision.from_allowed(False) is Decision.DENY
        assert not Decision.DENY.allowed


class TestValidateNode:
    def test_strips_whitespace(self) -> None:
        assert validate_node("  admin.kick ") == "admin.kick"

    @pytest.mark.parametrize("node", ["", "   ", None])
    def test_empty_rejected(self, node) -> None:
        with pytest.raises(ValidationError, match="empty"):
            validate_node(node)

    def test_too_long_rejected(self) -> None:
        validate_node("a" * MAX_NODE_LENGTH)
        with pytest.raises(ValidationError, match="512"):
            validate_node("a" * (MAX_NODE_LENGTH + 1))


def test_record_key() -> None:
    record = role_record("R1", "admin.kick", scope="g1")
    assert record.key == ("g1", RoleSubject("R1"), "admin.kick")
    assert record.allowed
