from __future__ import annotations

from auth_core.infrastructure.security.password_hasher import PasswordHasher


def test_hash_is_not_plaintext_and_verifies():
    hasher = PasswordHasher()

    digest = hasher.hash("Test123!@#")

    assert digest != "Test123!@#"
    assert digest.startswith("$argon2")
    assert hasher.verify("Test123!@#", digest) is True
    assert hasher.verify("wrong", digest) is False


def test_hash_is_salted():
    hasher = PasswordHasher()

    assert hasher.hash("Test123!@#") != hasher.hash("Test123!@#")


def test_verify_malformed_digest_returns_false():
    assert PasswordHasher().verify("Test123!@#", "not-a-digest") is False
