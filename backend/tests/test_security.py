"""
Tests for password hashing and token helpers.
"""
from datetime import timedelta

from buffalo_dashboard.core.security import (
    create_access_token,
    decode_token,
    get_password_hash,
    is_service_token,
    verify_password,
    verify_token,
)


def test_password_hash_roundtrip():
    hashed = get_password_hash("admin123")
    assert hashed != "admin123"
    assert verify_password("admin123", hashed)
    assert not verify_password("admin124", hashed)


def test_plaintext_stored_password_never_matches():
    assert not verify_password("admin123", "admin123")


def test_token_carries_subject_and_claims():
    token = create_access_token(subject="abc123", additional_claims={"username": "admin"})
    payload = decode_token(token)
    assert payload["sub"] == "abc123"
    assert payload["username"] == "admin"
    assert payload["type"] == "auth"
    assert verify_token(token) == "abc123"


def test_expired_token_rejected():
    token = create_access_token(subject="abc123", expires_delta=timedelta(minutes=-5))
    assert decode_token(token) is None
    assert verify_token(token) is None


def test_tampered_token_rejected():
    token = create_access_token(subject="abc123")
    header, payload, signature = token.split(".")
    assert verify_token(f"{header}.{payload}.{signature[::-1]}") is None


def test_wrong_token_type_rejected():
    token = create_access_token(subject="abc123", additional_claims={"type": "refresh"})
    assert verify_token(token) is None


def test_service_token():
    assert is_service_token("secret", "secret")
    assert not is_service_token("secret", "other")
    assert not is_service_token("secret", None)
    assert not is_service_token("", "")
