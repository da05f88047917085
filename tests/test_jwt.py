"""
tests.test_jwt

Token issue/verify behaviour (expiry, signature, claims).
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime, timedelta

import jwt
import pytest

from album_service.auth.jwt import JwtConfig, JwtValidationError, decode_and_validate, issue_token

CFG = JwtConfig(alg="HS256", secret="unit-secret")


def test_token_carries_user_id_and_twelve_hour_expiry() -> None:
    principal_id = uuid.uuid4()
    token = issue_token(cfg=CFG, principal_id=principal_id)

    payload = decode_and_validate(cfg=CFG, token=token)

    assert payload["userId"] == str(principal_id)
    assert payload["exp"] - payload["iat"] == 12 * 3600


def test_expired_token_is_rejected() -> None:
    issued = datetime.now(tz=UTC) - timedelta(hours=13)
    token = issue_token(cfg=CFG, principal_id=uuid.uuid4(), now=issued)

    with pytest.raises(JwtValidationError):
        decode_and_validate(cfg=CFG, token=token)


def test_token_signed_with_other_secret_is_rejected() -> None:
    token = issue_token(cfg=JwtConfig(alg="HS256", secret="other"), principal_id=uuid.uuid4())

    with pytest.raises(JwtValidationError):
        decode_and_validate(cfg=CFG, token=token)


def test_token_without_user_id_is_rejected() -> None:
    now = int(datetime.now(tz=UTC).timestamp())
    token = jwt.encode({"iat": now, "exp": now + 60}, CFG.secret, algorithm=CFG.alg)

    with pytest.raises(JwtValidationError):
        decode_and_validate(cfg=CFG, token=token)


def test_garbage_is_rejected() -> None:
    with pytest.raises(JwtValidationError):
        decode_and_validate(cfg=CFG, token="not-a-jwt")
