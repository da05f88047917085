"""
tests.conftest

Shared fixtures: an app bound to a throwaway SQLite file, an HTTP client, and
logged-in users (two regular users and an admin).
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from album_service.api.app import create_app
from album_service.settings import Settings
from helpers import LoggedIn, login_as


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        env="test",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'albums.db'}",
        jwt_secret="test-jwt-secret",
        session_secret="test-session-secret",
        bcrypt_rounds=4,
        log_level="WARNING",
    )


@pytest_asyncio.fixture()
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    app = create_app(settings=settings)
    # httpx ASGITransport does not run the lifespan; enter it explicitly.
    async with app.router.lifespan_context(app):
        yield app


@pytest_asyncio.fixture()
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture()
async def alice(client: httpx.AsyncClient) -> LoggedIn:
    return await login_as(client, "alice")


@pytest_asyncio.fixture()
async def bob(client: httpx.AsyncClient) -> LoggedIn:
    return await login_as(client, "bob")


@pytest_asyncio.fixture()
async def admin(client: httpx.AsyncClient) -> LoggedIn:
    return await login_as(client, "admin", role="admin")
