"""
album_service.auth.authenticator

Principal resolution from credentials.

Responsibilities:
- Resolve a username/password pair to a `Principal` (login).
- Resolve a bearer token to a `Principal` (every protected request).
"""

from __future__ import annotations

import uuid

from album_service.auth.jwt import JwtConfig, JwtValidationError, decode_and_validate
from album_service.auth.models import Principal
from album_service.auth.password import verify_password
from album_service.db.repositories.users import UserRepo
from album_service.errors import InvalidCredentials, InvalidToken, MissingCredential, UnknownPrincipal
from album_service.observability.logging import get_logger

log = get_logger(__name__)


async def authenticate(users: UserRepo, *, username: str, password: str) -> Principal:
    user = await users.get_by_username(username)
    if user is None:
        log.info("login_failed", reason="unknown_username")
        raise InvalidCredentials()
    if not verify_password(password, user.password_hash):
        log.info("login_failed", reason="bad_password", user_id=str(user.id))
        raise InvalidCredentials()
    return Principal.from_user(user)


async def verify_token(users: UserRepo, *, cfg: JwtConfig, token: str | None) -> Principal:
    if not token:
        raise MissingCredential("Unauthorized", error="Missing bearer token")

    try:
        payload = decode_and_validate(cfg=cfg, token=token)
    except JwtValidationError as e:
        raise InvalidToken("Unauthorized", error="Invalid token") from e

    try:
        principal_id = uuid.UUID(str(payload["userId"]))
    except ValueError as e:
        raise UnknownPrincipal("Unauthorized", error="Unknown user") from e

    user = await users.get(principal_id)
    if user is None:
        raise UnknownPrincipal("Unauthorized", error="Unknown user")
    return Principal.from_user(user)
