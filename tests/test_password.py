from __future__ import annotations

from album_service.auth.password import hash_password, verify_password


def test_hash_verifies_only_the_original_password() -> None:
    hashed = hash_password("hunter22", rounds=4)

    assert hashed != "hunter22"
    assert verify_password("hunter22", hashed)
    assert not verify_password("hunter23", hashed)


def test_malformed_stored_hash_does_not_verify() -> None:
    assert not verify_password("anything", "plain-text-not-a-hash")
