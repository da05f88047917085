"""
album_service.auth.guard

Access-control decisions for albums.

Responsibilities:
- Decide allow/deny from (role, principal id, album owner id, operation) only.
- Express the list visibility rule both as a predicate and as a store criterion.

Policy:
- admin: every operation on every album.
- owner: read/update/delete own albums.
- unowned album (owner_id is None): readable and listable by anyone
  authenticated, writable only by admins.
"""

from __future__ import annotations

import enum
import uuid

from sqlalchemy import ColumnElement, or_

from album_service.auth.models import Principal
from album_service.db.models import Album


class Operation(enum.StrEnum):
    list = "list"
    read = "read"
    create = "create"
    update = "update"
    delete = "delete"


def can_read(principal: Principal, owner_id: uuid.UUID | None) -> bool:
    if principal.is_admin:
        return True
    return owner_id is None or owner_id == principal.id


def can_list(principal: Principal, owner_id: uuid.UUID | None) -> bool:
    # Listing filters on exactly the read rule.
    return can_read(principal, owner_id)


def can_write(principal: Principal, owner_id: uuid.UUID | None) -> bool:
    if principal.is_admin:
        return True
    return owner_id is not None and owner_id == principal.id


def can_delete(principal: Principal, owner_id: uuid.UUID | None) -> bool:
    if principal.is_admin:
        return True
    return can_write(principal, owner_id)


_CHECKS = {
    Operation.list: can_list,
    Operation.read: can_read,
    Operation.update: can_write,
    Operation.delete: can_delete,
}


def is_allowed(principal: Principal, operation: Operation, owner_id: uuid.UUID | None = None) -> bool:
    if operation is Operation.create:
        return True
    return _CHECKS[operation](principal, owner_id)


def list_criterion(principal: Principal) -> ColumnElement[bool] | None:
    """
    `can_list` as a WHERE clause; None means no filtering (admin).
    """

    if principal.is_admin:
        return None
    return or_(Album.owner_id.is_(None), Album.owner_id == principal.id)
