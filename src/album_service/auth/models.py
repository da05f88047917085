"""
album_service.auth.models

Auth domain models.

Responsibilities:
- Define the authenticated identity type (`Principal`) passed into services and the guard.
"""

from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from album_service.db.models import User


class Role(enum.StrEnum):
    admin = "admin"
    user = "user"


@dataclass(frozen=True, slots=True)
class Principal:
    """
    Authenticated caller identity.

    Built from a `User` row by either the password authenticator or the token
    verifier; holds no credential material.
    """

    id: uuid.UUID
    username: str
    role: Role
    email: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.admin

    @classmethod
    def from_user(cls, user: User) -> Principal:
        return cls(id=user.id, username=user.username, role=Role(user.role), email=user.email)

    def public(self) -> dict[str, str | None]:
        return {
            "id": str(self.id),
            "username": self.username,
            "email": self.email,
            "role": self.role.value,
        }
