"""
album_service.services.albums

Album CRUD operations.

Responsibilities:
- Apply the access-control guard to every operation before touching the store.
- Force ownership: create stamps the caller as owner, update never reassigns it.

Each operation follows the same pipeline:
authenticated principal -> fetch (404) -> guard (403) -> mutate -> commit.
"""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from album_service.auth import guard
from album_service.auth.guard import Operation
from album_service.auth.models import Principal
from album_service.db.models import Album
from album_service.db.repositories.albums import UPDATABLE_FIELDS, AlbumRepo
from album_service.errors import AuthorizationFailure, NotFound
from album_service.observability.logging import get_logger
from album_service.services.base import TransactionalService

log = get_logger(__name__)

_FORBIDDEN = {
    Operation.read: "Forbidden: You are not allowed to access this album",
    Operation.update: "Forbidden: You are not allowed to update this album",
    Operation.delete: "Forbidden: You are not allowed to delete this album",
}


def _parse_id(album_id: str | uuid.UUID) -> uuid.UUID | None:
    if isinstance(album_id, uuid.UUID):
        return album_id
    try:
        return uuid.UUID(album_id)
    except ValueError:
        return None


class AlbumService(TransactionalService):
    def __init__(self, *, session: AsyncSession) -> None:
        super().__init__(session=session)
        self._albums = AlbumRepo(session)

    async def list_albums(self, principal: Principal) -> list[Album]:
        # Query-level filtering replaces a per-item guard check.
        return await self._albums.find_where(guard.list_criterion(principal))

    async def get_album(self, principal: Principal, album_id: str | uuid.UUID) -> Album:
        return await self._fetch_authorized(principal, album_id, Operation.read)

    async def create_album(self, principal: Principal, fields: dict[str, Any]) -> Album:
        album = await self._albums.create(
            title=fields["title"],
            artist=fields["artist"],
            genre=fields["genre"],
            year=fields["year"],
            tracks=fields.get("tracks"),
            owner_id=principal.id,
        )
        await self._commit()
        log.info("album_created", album_id=str(album.id), owner_id=str(principal.id))
        return album

    async def update_album(
        self,
        principal: Principal,
        album_id: str | uuid.UUID,
        changes: dict[str, Any],
    ) -> Album:
        album = await self._fetch_authorized(principal, album_id, Operation.update)
        # Owner (and anything else outside the updatable set) is dropped here.
        allowed = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}
        album = await self._albums.update(album, allowed)
        await self._commit()
        log.info("album_updated", album_id=str(album.id), fields=sorted(allowed))
        return album

    async def delete_album(self, principal: Principal, album_id: str | uuid.UUID) -> None:
        album = await self._fetch_authorized(principal, album_id, Operation.delete)
        await self._albums.delete(album)
        await self._commit()
        log.info("album_deleted", album_id=str(album.id), admin=principal.is_admin)

    async def _fetch_authorized(
        self,
        principal: Principal,
        album_id: str | uuid.UUID,
        operation: Operation,
    ) -> Album:
        parsed = _parse_id(album_id)
        album = await self._albums.get(parsed) if parsed is not None else None
        if album is None:
            raise NotFound("Album not found")
        if not guard.is_allowed(principal, operation, album.owner_id):
            log.info(
                "access_denied",
                operation=operation.value,
                album_id=str(album.id),
                principal_id=str(principal.id),
            )
            raise AuthorizationFailure(_FORBIDDEN[operation])
        return album
