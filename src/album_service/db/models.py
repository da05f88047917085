"""
album_service.db.models

Persistence schema.

Responsibilities:
- User: credential store record (username, bcrypt hash, role).
- Album: owned resource; `owner_id` NULL means shared/unowned.
"""

from __future__ import annotations

import enum
import uuid
from datetime import UTC, datetime

from sqlalchemy import Enum, ForeignKey, String, Uuid as SAUuid
from sqlalchemy.orm import Mapped, mapped_column

from album_service.db.base import Base


def _utcnow() -> datetime:
    # Naive UTC timestamps; SQLite has no tz-aware column type.
    return datetime.now(tz=UTC).replace(tzinfo=None)


class Genre(enum.StrEnum):
    rock = "Rock"
    pop = "Pop"
    jazz = "Jazz"
    hip_hop = "Hip-Hop"
    country = "Country"
    classical = "Classical"
    electronic = "Electronic"


class User(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    username: Mapped[str] = mapped_column(String(128), nullable=False, unique=True, index=True)
    email: Mapped[str | None] = mapped_column(String(256), nullable=True)
    password_hash: Mapped[str] = mapped_column(String(128), nullable=False)
    role: Mapped[str] = mapped_column(String(16), nullable=False, default="user")

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)


class Album(Base):
    __tablename__ = "albums"

    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    title: Mapped[str] = mapped_column(String(50), nullable=False)
    artist: Mapped[str] = mapped_column(String(50), nullable=False)
    genre: Mapped[Genre] = mapped_column(
        Enum(Genre, native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    year: Mapped[int] = mapped_column(nullable=False)
    tracks: Mapped[int | None] = mapped_column(nullable=True)

    owner_id: Mapped[uuid.UUID | None] = mapped_column(
        SAUuid(as_uuid=True), ForeignKey("users.id"), nullable=True, index=True
    )

    updated_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow, onupdate=_utcnow)

    def to_dict(self) -> dict[str, object]:
        return {
            "id": str(self.id),
            "title": self.title,
            "artist": self.artist,
            "genre": Genre(self.genre).value,
            "year": self.year,
            "tracks": self.tracks,
            "ownerId": str(self.owner_id) if self.owner_id is not None else None,
            "lastModified": self.updated_at.isoformat(),
        }


# --- Module Notes -----------------------------------------------------------
# Field ranges (title/artist length, year, tracks) are enforced on the request
# models in `api.routers.albums`; the columns only carry the hard limits.
