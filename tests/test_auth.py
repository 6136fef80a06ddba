"""비밀번호 해시 / JWT 유틸 테스트"""
from datetime import timedelta

import jwt
import pytest
from fastapi import HTTPException

from config import settings
from utils.auth import (
    DUMMY_HASH,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


class TestPassword:

    def test_hash_and_verify(self):
        hashed = hash_password("password1")
        assert hashed.startswith("$2b$")
        assert verify_password("password1", hashed)
        assert not verify_password("password2", hashed)

    def test_dummy_hash_never_matches_user_input(self):
        assert not verify_password("password1", DUMMY_HASH)

    def test_invalid_hash_format(self):
        """잘못된 해시 형식은 예외 대신 False"""
        assert verify_password("password1", "not-a-bcrypt-hash") is False


class TestToken:

    def test_payload(self):
        payload = decode_access_token(create_access_token("u1", is_admin=True))
        assert payload["sub"] == "u1"
        assert payload["is_admin"] is True
        assert "exp" in payload

    def test_expired(self):
        token = create_access_token("u1", expires_delta=timedelta(seconds=-1))
        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(token)
        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "token is expired"

    def test_wrong_signature(self):
        token = jwt.encode({"sub": "u1"}, "another-secret-key-that-is-long-enough", algorithm=settings.algorithm)
        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(token)
        assert exc_info.value.detail == "invalid token"
