"""Группы: создатель сразу участник, вступление только по приглашению участника."""

import pytest
from sqlalchemy.exc import SQLAlchemyError

from alumni.models.group import Group
from alumni.models.group_membership import GroupMembership
from alumni.services import groups, membership
from alumni.services.outcomes import JoinOutcome


def _create(db, creator, name="Eng Alumni"):
    return groups.create_group(db, Group(name=name, description="Engineering alumni"), creator)


def test_creator_is_first_member(db, alice):
    group = _create(db, alice)

    assert groups.user_has_access(db, group, alice)
    assert [m.user_id for m in group.memberships] == [alice.id]


def test_create_rolls_back_when_enrollment_fails(db, alice, monkeypatch):
    def boom(*args, **kwargs):
        raise SQLAlchemyError("insert failed")

    monkeypatch.setattr(membership, "add_member", boom)

    with pytest.raises(SQLAlchemyError):
        _create(db, alice)

    assert db.query(Group).count() == 0
    assert db.query(GroupMembership).count() == 0


def test_get_user_groups_returns_only_member_groups(db, alice, bob):
    mine = _create(db, alice, "Mine")
    _create(db, bob, "Not mine")
    also_mine = _create(db, alice, "Also mine")

    assert [g.id for g in groups.get_user_groups(db, alice)] == [mine.id, also_mine.id]


def test_get_group_and_exists(db, alice):
    group = _create(db, alice)

    assert groups.get_group(db, group.id).name == "Eng Alumni"
    assert groups.get_group(db, 999) is None
    assert groups.group_exists(db, group.id)
    assert not groups.group_exists(db, 999)


def test_member_can_add_another_user(db, alice, bob):
    group = _create(db, alice)

    assert groups.join_group(db, group.id, alice, bob.id) is JoinOutcome.JOINED
    assert membership.members_of(db, group.id) == {alice.id, bob.id}
    assert groups.user_has_access(db, group, bob)


def test_join_twice_is_idempotent(db, alice, bob):
    group = _create(db, alice)

    assert groups.join_group(db, group.id, alice, bob.id) is JoinOutcome.JOINED
    assert groups.join_group(db, group.id, alice, bob.id) is JoinOutcome.JOINED
    # участник вступает сам (тривиально)
    assert groups.join_group(db, group.id, alice) is JoinOutcome.JOINED

    assert db.query(GroupMembership).filter_by(group_id=group.id).count() == 2


@pytest.mark.parametrize("target", ["self", "other", "member"])
def test_non_member_is_forbidden_without_mutation(db, alice, bob, carol, target):
    group = _create(db, alice)
    target_id = {"self": None, "other": carol.id, "member": alice.id}[target]

    assert groups.join_group(db, group.id, bob, target_id) is JoinOutcome.FORBIDDEN
    assert membership.members_of(db, group.id) == {alice.id}


def test_missing_group_is_not_found_even_for_members_elsewhere(db, alice):
    _create(db, alice)

    assert groups.join_group(db, 999, alice) is JoinOutcome.NOT_FOUND


def test_unknown_target_user_is_invalid(db, alice):
    group = _create(db, alice)

    assert groups.join_group(db, group.id, alice, 12345) is JoinOutcome.INVALID_USER
    assert membership.members_of(db, group.id) == {alice.id}


def test_zero_target_is_the_requesting_user(db, alice, bob):
    group = _create(db, alice)

    assert groups.join_group(db, group.id, alice, 0) is JoinOutcome.JOINED
    assert groups.join_group(db, group.id, bob, 0) is JoinOutcome.FORBIDDEN
    assert membership.members_of(db, group.id) == {alice.id}
