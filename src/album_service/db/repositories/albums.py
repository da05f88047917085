"""
album_service.db.repositories.albums

Repository for `Album` entities.

Responsibilities:
- find-by-id, find-matching (arbitrary criterion), create, update, delete.
"""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy import ColumnElement, select
from sqlalchemy.ext.asyncio import AsyncSession

from album_service.db.models import Album, _utcnow

# Columns an update may touch; id and owner_id are fixed at creation.
UPDATABLE_FIELDS = frozenset({"title", "artist", "genre", "year", "tracks"})


class AlbumRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, album_id: uuid.UUID) -> Album | None:
        return await self._session.get(Album, album_id)

    async def find_where(self, criterion: ColumnElement[bool] | None = None) -> list[Album]:
        stmt = select(Album).order_by(Album.updated_at, Album.id)
        if criterion is not None:
            stmt = stmt.where(criterion)
        return list((await self._session.execute(stmt)).scalars().all())

    async def create(
        self,
        *,
        title: str,
        artist: str,
        genre: str,
        year: int,
        owner_id: uuid.UUID | None,
        tracks: int | None = None,
    ) -> Album:
        album = Album(
            title=title,
            artist=artist,
            genre=genre,
            year=year,
            tracks=tracks,
            owner_id=owner_id,
        )
        self._session.add(album)
        await self._session.flush()
        return album

    async def update(self, album: Album, changes: dict[str, Any]) -> Album:
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"not updatable: {sorted(unknown)}")
        for field, value in changes.items():
            setattr(album, field, value)
        # onupdate only fires when a column changed; an empty update still touches it.
        album.updated_at = _utcnow()
        await self._session.flush()
        return album

    async def delete(self, album: Album) -> None:
        await self._session.delete(album)
        await self._session.flush()
