"""Unit tests for security functions."""
from datetime import timedelta

import jwt
import pytest
from fastapi import HTTPException
from unittest.mock import Mock

from foundershub.core import config
from foundershub.core.security import (
    create_access_token,
    create_user_token,
    decode_access_token,
    get_bearer_token,
    get_password_hash,
    verify_password,
    verify_user_token,
)


def _request_with_auth(value):
    request = Mock()
    request.headers = {} if value is None else {"authorization": value}
    return request


@pytest.mark.unit
class TestPasswordHashing:
    """Test Argon2 password hashing."""

    def test_hash_is_not_plaintext(self):
        """Stored hash should never equal the password."""
        hashed = get_password_hash("s3cret-pass")
        assert hashed != "s3cret-pass"
        assert hashed.startswith("$argon2")

    def test_verify_correct_password(self):
        hashed = get_password_hash("s3cret-pass")
        assert verify_password("s3cret-pass", hashed) is True

    def test_verify_wrong_password(self):
        hashed = get_password_hash("s3cret-pass")
        assert verify_password("wrong", hashed) is False

    def test_verify_against_garbage_hash(self):
        """A corrupt stored hash should fail closed, not raise."""
        assert verify_password("anything", "not-a-hash") is False


@pytest.mark.unit
class TestJWT:
    """Test JWT token creation and verification."""

    def test_create_access_token(self):
        """Should create valid JWT token."""
        token = create_access_token({"id": 1})

        assert isinstance(token, str)
        # JWT format: header.payload.signature
        assert token.count(".") == 2

    def test_user_token_claims(self):
        """Login token carries id, email and name."""
        user = Mock(id=7, email="ada@example.com")
        user.name = "Ada"
        payload = decode_access_token(create_user_token(user))

        assert payload["id"] == 7
        assert payload["email"] == "ada@example.com"
        assert payload["name"] == "Ada"
        assert "exp" in payload

    def test_expired_token_rejected(self):
        token = create_access_token({"id": 1}, expires_delta=timedelta(seconds=-1))

        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(token)
        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Token expired"

    def test_wrong_secret_rejected(self):
        token = jwt.encode({"id": 1}, "some-other-secret", algorithm=config.settings.ALGORITHM)

        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(token)
        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Invalid token"


@pytest.mark.unit
class TestBearerHeader:
    """Test Authorization header parsing."""

    def test_extracts_token(self):
        assert get_bearer_token(_request_with_auth("Bearer abc.def.ghi")) == "abc.def.ghi"

    def test_missing_header(self):
        assert get_bearer_token(_request_with_auth(None)) is None

    def test_wrong_scheme(self):
        assert get_bearer_token(_request_with_auth("Basic dXNlcjpwYXNz")) is None

    def test_verify_user_token_returns_id(self):
        token = create_access_token({"id": 42})
        assert verify_user_token(_request_with_auth(f"Bearer {token}")) == 42

    def test_verify_user_token_missing(self):
        with pytest.raises(HTTPException) as exc_info:
            verify_user_token(_request_with_auth(None))
        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Authentication required"

    def test_verify_user_token_without_id_claim(self):
        token = create_access_token({"email": "nobody@example.com"})
        with pytest.raises(HTTPException) as exc_info:
            verify_user_token(_request_with_auth(f"Bearer {token}"))
        assert exc_info.value.detail == "Invalid token"
