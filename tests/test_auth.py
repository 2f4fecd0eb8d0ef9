# =============================================================================
# tests/test_auth.py - Supabase JWT Verification Tests
# =============================================================================

import time
import uuid

import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials
from jose import jwt

from backoffice.core.auth import AuthContext, decode_access_token, get_auth_context
from backoffice.core.config import get_settings

USER_ID = "22222222-2222-2222-2222-222222222222"


def make_token(secret: str | None = None, **claims) -> str:
    settings = get_settings()
    payload = {
        "sub": USER_ID,
        "email": "jorge.salas@example.com",
        "aud": "authenticated",
        "exp": int(time.time()) + 3600,
    }
    payload.update(claims)
    return jwt.encode(
        payload,
        secret or settings.SUPABASE_JWT_SECRET,
        algorithm=settings.SUPABASE_JWT_ALG,
    )


def bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestDecodeAccessToken:
    """Tests for decode_access_token()."""

    def test_valid_token(self):
        payload = decode_access_token(make_token())
        assert payload["sub"] == USER_ID

    def test_expired_token(self):
        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(make_token(exp=int(time.time()) - 10))
        assert exc_info.value.status_code == 401

    def test_wrong_secret(self):
        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(make_token(secret="another-secret"))
        assert exc_info.value.status_code == 401

    def test_garbage(self):
        with pytest.raises(HTTPException):
            decode_access_token("not.a.jwt")


class TestAuthContext:
    """Tests for get_auth_context()."""

    def test_no_credentials(self):
        assert get_auth_context(None) is None

    def test_builds_context(self):
        ctx = get_auth_context(bearer(make_token()))

        assert ctx == AuthContext(user_id=uuid.UUID(USER_ID), email="jorge.salas@example.com")
        assert ctx.author_name == "jorge.salas"

    def test_missing_email(self):
        with pytest.raises(HTTPException) as exc_info:
            get_auth_context(bearer(make_token(email=None)))
        assert exc_info.value.status_code == 401

    def test_sub_must_be_uuid(self):
        with pytest.raises(HTTPException) as exc_info:
            get_auth_context(bearer(make_token(sub="user-1")))
        assert exc_info.value.status_code == 401

    def test_author_name_fallback(self):
        assert AuthContext(user_id=uuid.uuid4(), email="").author_name == "Admin"


class TestAdminMe:
    """GET /admin/me."""

    def test_with_real_token(self, anon_client):
        response = anon_client.get(
            "/api/v1/admin/me",
            headers={"Authorization": f"Bearer {make_token()}"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "user_id": USER_ID,
            "email": "jorge.salas@example.com",
            "author_name": "jorge.salas",
        }

    def test_without_token(self, anon_client):
        assert anon_client.get("/api/v1/admin/me").status_code == 401

    def test_with_bad_token(self, anon_client):
        response = anon_client.get(
            "/api/v1/admin/me", headers={"Authorization": "Bearer nope"}
        )
        assert response.status_code == 401
