"""
album_service.db.init_db

DB initialization helpers.

Responsibilities:
- Verify the store is reachable before the service accepts traffic.
- Create tables for local development and tests.
"""

from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from album_service.db import models  # noqa: F401  # register models on Base.metadata
from album_service.db.base import Base


async def check_connection(engine: AsyncEngine) -> None:
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def init_db(engine: AsyncEngine) -> None:
    """
    Dev/test bootstrap: create tables if they don't exist.
    Production relies on Alembic migrations.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
