"""
album_service.api.routers.albums

Bearer-protected album CRUD endpoints.

Responsibilities:
- Validate album payloads against the static field schema.
- Resolve the caller via `get_principal` and delegate to `AlbumService`.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field, field_validator
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED

from album_service.api.deps import db_session
from album_service.auth.deps import get_principal
from album_service.auth.models import Principal
from album_service.db.models import Genre
from album_service.services.albums import AlbumService

router = APIRouter(prefix="/albums", tags=["albums"])

MIN_YEAR = 1900


def _check_year(value: int | None) -> int | None:
    # Upper bound moves with the calendar, so it cannot be a static Field(le=...).
    if value is not None and value > date.today().year:
        raise ValueError(f"year must be between {MIN_YEAR} and {date.today().year}")
    return value


class AlbumCreateRequest(BaseModel):
    # Unknown keys (owner, ownerId, id...) are dropped, never applied.
    model_config = ConfigDict(extra="ignore")

    title: str = Field(min_length=3, max_length=50)
    artist: str = Field(min_length=3, max_length=50)
    genre: Genre
    year: int = Field(ge=MIN_YEAR)
    tracks: int | None = Field(default=None, ge=1, le=100)

    @field_validator("year")
    @classmethod
    def year_not_in_future(cls, value: int | None) -> int | None:
        return _check_year(value)


class AlbumUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(default=None, min_length=3, max_length=50)
    artist: str | None = Field(default=None, min_length=3, max_length=50)
    genre: Genre | None = None
    year: int | None = Field(default=None, ge=MIN_YEAR)
    tracks: int | None = Field(default=None, ge=1, le=100)

    @field_validator("year")
    @classmethod
    def year_not_in_future(cls, value: int | None) -> int | None:
        return _check_year(value)


@router.get("")
async def list_albums(
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(db_session),
) -> dict[str, Any]:
    albums = await AlbumService(session=session).list_albums(principal)
    return {"albums": [a.to_dict() for a in albums]}


@router.get("/{album_id}")
async def get_album(
    album_id: str,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(db_session),
) -> dict[str, Any]:
    album = await AlbumService(session=session).get_album(principal, album_id)
    return {"album": album.to_dict()}


@router.post("", status_code=HTTP_201_CREATED)
async def create_album(
    body: AlbumCreateRequest,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(db_session),
) -> dict[str, Any]:
    album = await AlbumService(session=session).create_album(principal, body.model_dump())
    return {"message": "Album created successfully", "album": album.to_dict()}


@router.put("/{album_id}")
async def update_album(
    album_id: str,
    body: AlbumUpdateRequest,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(db_session),
) -> dict[str, Any]:
    # Only fields the client actually sent; explicit nulls are ignored.
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    album = await AlbumService(session=session).update_album(principal, album_id, changes)
    return {"message": "Album updated successfully", "album": album.to_dict()}


@router.delete("/{album_id}")
async def delete_album(
    album_id: str,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(db_session),
) -> dict[str, str]:
    await AlbumService(session=session).delete_album(principal, album_id)
    return {"message": "Album deleted successfully"}


# --- Module Notes -----------------------------------------------------------
# Every route depends on `get_principal`, so a missing/invalid token returns 401
# before the body is used or the store is touched for the album.
