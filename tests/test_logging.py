from __future__ import annotations

from album_service.observability.logging import REDACTED, redact_secrets


def test_credentials_are_masked_and_ids_kept() -> None:
    event = redact_secrets(
        None,
        "info",
        {
            "event": "login_failed",
            "password": "hunter22",
            "password_hash": "$2b$04$abc",
            "token": "eyJ...",
            "user_id": "42",
        },
    )

    assert event["password"] == REDACTED
    assert event["password_hash"] == REDACTED
    assert event["token"] == REDACTED
    assert event["user_id"] == "42"
    assert event["event"] == "login_failed"


def test_absent_or_null_secrets_are_left_alone() -> None:
    event = redact_secrets(None, "info", {"event": "logout", "session": None})

    assert event == {"event": "logout", "session": None}
