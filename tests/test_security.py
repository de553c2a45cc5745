"""Tests for password hashing and JWT helpers."""

from __future__ import annotations

import pytest

from portfolio.core.security import (
    create_access_token,
    get_password_hash,
    verify_password,
    verify_token,
)

pytestmark = pytest.mark.unit


def test_password_hash_round_trip():
    hashed = get_password_hash("hunter2")

    assert hashed != "hunter2"
    assert verify_password("hunter2", hashed)
    assert not verify_password("hunter3", hashed)


def test_unknown_hash_format_does_not_verify():
    assert not verify_password("anything", "plain-text-not-a-hash")


def test_token_carries_claims_and_expiry():
    token = create_access_token({"sub": "42", "email": "a@b.c", "role": "admin"})

    payload = verify_token(token)

    assert payload["sub"] == "42"
    assert payload["role"] == "admin"
    assert "exp" in payload


def test_garbage_token_is_rejected():
    assert verify_token("not.a.jwt") is None
