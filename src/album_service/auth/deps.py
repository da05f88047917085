"""
album_service.auth.deps

FastAPI dependency functions for authentication.

Responsibilities:
- Convert a bearer token into a typed `Principal` before any album handler runs.
"""

from __future__ import annotations

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from album_service.api.deps import db_session, settings_dep
from album_service.auth.authenticator import verify_token
from album_service.auth.jwt import JwtConfig
from album_service.auth.models import Principal
from album_service.db.repositories.users import UserRepo
from album_service.settings import Settings

_bearer = HTTPBearer(auto_error=False)


async def get_principal(
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(settings_dep),
) -> Principal:
    # Failures raise AuthenticationFailure subclasses -> 401 via the app handlers.
    token = creds.credentials if creds is not None else None
    return await verify_token(UserRepo(session), cfg=JwtConfig.from_settings(settings), token=token)


# --- Module Notes -----------------------------------------------------------
# The principal is returned to the handler and passed explicitly onward; it is
# never stashed on request.state.
