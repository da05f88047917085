"""
album_service.api.app

FastAPI app factory for the Album service.

Responsibilities:
- Build the FastAPI application and register routers/middleware/error handlers.
- Connect to the store in the lifespan (fatal on failure) and dispose it on exit.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from album_service import __version__
from album_service.api.errors import install_exception_handlers
from album_service.api.routers.albums import router as albums_router
from album_service.api.routers.auth import router as auth_router
from album_service.api.routers.health import router as health_router
from album_service.db.init_db import check_connection, init_db
from album_service.db.session import create_engine, create_sessionmaker
from album_service.observability.logging import configure_logging, get_logger
from album_service.observability.middleware import RequestContextMiddleware
from album_service.settings import Settings

log = get_logger(__name__)


def _lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        engine = create_engine(settings)
        try:
            # The listener must not accept traffic without a working store.
            await check_connection(engine)
            if settings.env in ("dev", "test"):
                await init_db(engine)
        except Exception:
            log.exception("store_connection_failed")
            await engine.dispose()
            raise
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    return lifespan


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    app = FastAPI(
        title="Album Service",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=_lifespan(settings),
    )
    app.state.settings = settings

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        https_only=settings.env == "prod",
    )
    app.add_middleware(RequestContextMiddleware)
    install_exception_handlers(app)

    app.include_router(health_router, tags=["health"])
    app.include_router(auth_router)
    app.include_router(albums_router)

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; auth decisions live in `auth.guard`, operations in
# `services.albums`.
