"""
tests.test_guard

Truth-table tests for the album access-control decisions.
"""

from __future__ import annotations

import itertools
import uuid

import pytest

from album_service.auth import guard
from album_service.auth.guard import Operation
from album_service.auth.models import Principal, Role

ALICE = Principal(id=uuid.uuid4(), username="alice", role=Role.user)
BOB = Principal(id=uuid.uuid4(), username="bob", role=Role.user)
ROOT = Principal(id=uuid.uuid4(), username="root", role=Role.admin)

OWNERS = [None, ALICE.id, BOB.id, ROOT.id, uuid.uuid4()]


def test_owner_can_read_and_write_own_album() -> None:
    assert guard.can_read(ALICE, ALICE.id)
    assert guard.can_write(ALICE, ALICE.id)
    assert guard.can_delete(ALICE, ALICE.id)


def test_other_user_is_denied_everything_on_owned_album() -> None:
    assert not guard.can_read(BOB, ALICE.id)
    assert not guard.can_list(BOB, ALICE.id)
    assert not guard.can_write(BOB, ALICE.id)
    assert not guard.can_delete(BOB, ALICE.id)


def test_unowned_album_is_readable_but_not_writable_by_users() -> None:
    assert guard.can_read(BOB, None)
    assert guard.can_list(BOB, None)
    assert not guard.can_write(BOB, None)
    assert not guard.can_delete(BOB, None)


@pytest.mark.parametrize("owner_id", OWNERS)
def test_admin_is_allowed_every_operation(owner_id: uuid.UUID | None) -> None:
    for op in Operation:
        assert guard.is_allowed(ROOT, op, owner_id)


def test_create_is_always_allowed() -> None:
    assert guard.is_allowed(ALICE, Operation.create)
    assert guard.is_allowed(BOB, Operation.create, ALICE.id)


def test_write_implies_read() -> None:
    for principal, owner_id in itertools.product([ALICE, BOB, ROOT], OWNERS):
        if guard.can_write(principal, owner_id) or guard.can_delete(principal, owner_id):
            assert guard.can_read(principal, owner_id)


def test_list_criterion_is_none_for_admin_only() -> None:
    assert guard.list_criterion(ROOT) is None
    criterion = guard.list_criterion(ALICE)
    assert criterion is not None
    sql = str(criterion)
    assert "owner_id IS NULL" in sql
