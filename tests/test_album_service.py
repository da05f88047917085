"""
tests.test_album_service

Service-level checks that the store query and the guard agree.
"""

from __future__ import annotations

import uuid

import pytest
from fastapi import FastAPI

from album_service.auth import guard
from album_service.auth.models import Principal, Role
from album_service.db.repositories.albums import AlbumRepo
from album_service.db.repositories.users import UserRepo
from album_service.errors import AuthorizationFailure, NotFound
from album_service.services.albums import AlbumService


async def _principal(session, username: str, role: Role = Role.user) -> Principal:
    user = await UserRepo(session).create(
        username=username, email=None, password_hash="x", role=role.value
    )
    return Principal.from_user(user)


@pytest.mark.asyncio
async def test_list_matches_can_list_for_every_principal(app: FastAPI) -> None:
    async with app.state.sessionmaker() as session:
        alice = await _principal(session, "alice")
        bob = await _principal(session, "bob")
        root = await _principal(session, "root", Role.admin)
        repo = AlbumRepo(session)
        for owner in (alice.id, alice.id, bob.id, root.id, None, None):
            await repo.create(title="Title", artist="Artist", genre="Pop", year=2001, owner_id=owner)
        await session.commit()

        everything = await repo.find_where()
        svc = AlbumService(session=session)
        for principal in (alice, bob, root):
            listed = {a.id for a in await svc.list_albums(principal)}
            expected = {a.id for a in everything if guard.can_list(principal, a.owner_id)}
            assert listed == expected

        assert len(await svc.list_albums(root)) == len(everything)


@pytest.mark.asyncio
async def test_update_drops_owner_change(app: FastAPI) -> None:
    async with app.state.sessionmaker() as session:
        alice = await _principal(session, "alice")
        bob = await _principal(session, "bob")
        svc = AlbumService(session=session)
        album = await svc.create_album(
            alice, {"title": "Title", "artist": "Artist", "genre": "Rock", "year": 2010}
        )

        updated = await svc.update_album(alice, album.id, {"owner_id": bob.id, "year": 2011})

        assert updated.owner_id == alice.id
        assert updated.year == 2011


@pytest.mark.asyncio
async def test_not_found_precedes_forbidden(app: FastAPI) -> None:
    async with app.state.sessionmaker() as session:
        bob = await _principal(session, "bob")
        svc = AlbumService(session=session)

        with pytest.raises(NotFound):
            await svc.delete_album(bob, uuid.uuid4())

        alice = await _principal(session, "alice")
        album = await svc.create_album(
            alice, {"title": "Title", "artist": "Artist", "genre": "Rock", "year": 2010}
        )
        with pytest.raises(AuthorizationFailure):
            await svc.delete_album(bob, album.id)
