"""
album_service.auth.jwt

JWT issuing and validation helpers.

Responsibilities:
- Issue time-limited tokens embedding the principal id at login.
- Decode and validate tokens with strict claim requirements (userId/iat/exp).
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt import InvalidTokenError

from album_service.settings import Settings

TOKEN_TTL = timedelta(hours=12)


@dataclass(frozen=True, slots=True)
class JwtConfig:
    alg: str
    secret: str
    ttl: timedelta = TOKEN_TTL

    @classmethod
    def from_settings(cls, settings: Settings) -> JwtConfig:
        return cls(
            alg=settings.jwt_alg,
            secret=settings.jwt_secret,
            ttl=timedelta(hours=settings.jwt_ttl_hours),
        )


class JwtValidationError(Exception):
    pass


def issue_token(
    *,
    cfg: JwtConfig,
    principal_id: uuid.UUID,
    now: datetime | None = None,
) -> str:
    now = now or datetime.now(tz=UTC)
    payload: dict[str, Any] = {
        "userId": str(principal_id),
        "iat": int(now.timestamp()),
        "exp": int((now + cfg.ttl).timestamp()),
    }
    return jwt.encode(payload, cfg.secret, algorithm=cfg.alg)


def decode_and_validate(*, cfg: JwtConfig, token: str) -> dict[str, Any]:
    try:
        # Signature and exp are checked by PyJWT; userId/iat must be present.
        return jwt.decode(
            token,
            cfg.secret,
            algorithms=[cfg.alg],
            options={"require": ["userId", "iat", "exp"]},
        )
    except InvalidTokenError as e:
        raise JwtValidationError(str(e)) from e


# --- Module Notes -----------------------------------------------------------
# Tokens are stateless: there is no revocation list, a token lives until `exp`
# or until the signing secret changes.
