"""
album_service.db.repositories.users

Repository for `User` entities (the credential store).
"""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from album_service.db.models import User


class UserRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, user_id: uuid.UUID) -> User | None:
        return await self._session.get(User, user_id)

    async def get_by_username(self, username: str) -> User | None:
        stmt = select(User).where(User.username == username)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def create(
        self,
        *,
        username: str,
        email: str | None,
        password_hash: str,
        role: str,
    ) -> User:
        user = User(username=username, email=email, password_hash=password_hash, role=role)
        self._session.add(user)
        await self._session.flush()
        return user
