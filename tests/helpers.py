"""
tests.helpers

Account and seeding helpers shared by the API tests.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

import httpx
from fastapi import FastAPI

from album_service.db.models import Album
from album_service.db.repositories.albums import AlbumRepo

PASSWORD = "s3cret-pass"


@dataclass(frozen=True)
class LoggedIn:
    id: uuid.UUID
    username: str
    token: str

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


async def register(
    client: httpx.AsyncClient,
    username: str,
    *,
    password: str = PASSWORD,
    role: str = "user",
) -> httpx.Response:
    return await client.post(
        "/register",
        json={
            "username": username,
            "email": f"{username}@example.com",
            "password": password,
            "confirmPassword": password,
            "role": role,
        },
    )


async def login_as(client: httpx.AsyncClient, username: str, *, role: str = "user") -> LoggedIn:
    r = await register(client, username, role=role)
    assert r.status_code == 200, r.text
    r = await client.post("/login", json={"username": username, "password": PASSWORD})
    assert r.status_code == 200, r.text
    body = r.json()
    return LoggedIn(id=uuid.UUID(body["user"]["id"]), username=username, token=body["token"])


async def seed_album(app: FastAPI, *, owner_id: uuid.UUID | None, title: str = "Seeded") -> Album:
    # Bypasses the API so unowned albums can exist.
    async with app.state.sessionmaker() as session:
        album = await AlbumRepo(session).create(
            title=title,
            artist="Some Artist",
            genre="Jazz",
            year=1999,
            owner_id=owner_id,
        )
        await session.commit()
        return album
