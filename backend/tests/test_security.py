from datetime import datetime, timedelta, timezone

import jwt
import pytest
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError

from app.core.config import settings
from app.core.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)


def test_password_hash_verifies_only_original_password():
    hashed = get_password_hash("correct horse")

    assert hashed != "correct horse"
    assert verify_password("correct horse", hashed)
    assert not verify_password("correct horse!", hashed)
    assert not verify_password("", hashed)


def test_password_hash_is_salted_with_cost_10():
    first = get_password_hash("secret")
    second = get_password_hash("secret")

    assert first != second
    assert first.startswith("$2b$10$")


def test_token_round_trip_returns_user_id():
    token = create_access_token("user-123")

    assert decode_access_token(token) == "user-123"


def test_token_expires_after_30_days():
    token = create_access_token("user-123")
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])

    lifetime = payload["exp"] - payload["iat"]
    assert lifetime == 30 * 24 * 60 * 60


def test_expired_token_is_rejected():
    token = create_access_token("user-123", expires_delta=timedelta(seconds=-5))

    with pytest.raises(ExpiredSignatureError):
        decode_access_token(token)


def test_token_signed_with_other_secret_is_rejected():
    forged = jwt.encode(
        {"userId": "user-123", "exp": datetime.now(timezone.utc) + timedelta(days=1)},
        "not-the-server-secret",
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenError):
        decode_access_token(forged)


def test_tampered_signature_is_rejected():
    header, payload, signature = create_access_token("user-123").split(".")
    tampered_signature = ("A" if signature[0] != "A" else "B") + signature[1:]

    with pytest.raises(InvalidTokenError):
        decode_access_token(f"{header}.{payload}.{tampered_signature}")


def test_token_without_user_id_is_rejected():
    token = jwt.encode(
        {"sub": "user-123", "exp": datetime.now(timezone.utc) + timedelta(days=1)},
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
    )

    with pytest.raises(InvalidTokenError):
        decode_access_token(token)


def test_token_without_expiry_is_rejected():
    token = jwt.encode({"userId": "user-123"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

    with pytest.raises(InvalidTokenError):
        decode_access_token(token)


def test_garbage_token_is_rejected():
    with pytest.raises(InvalidTokenError):
        decode_access_token("not-a-jwt")
