"""
Unit tests for backend/auth.py (API key and Clerk JWT validation).
"""

from unittest.mock import MagicMock, patch

import jwt
import pytest
from fastapi import HTTPException

from backend.auth import get_current_user, get_jwks_client, validate_api_key, validate_jwt
from backend.settings import Settings

pytestmark = pytest.mark.unit


@pytest.fixture
def settings() -> Settings:
    return Settings(
        environment="test",
        api_keys="sk_test_abc,sk_test_def",
        clerk_domain="example.clerk.accounts.dev",
        _env_file=None,
    )


class TestValidateApiKey:
    def test_plain_key_is_admin(self, settings):
        assert validate_api_key("sk_test_abc", settings) == "admin"

    def test_key_with_user(self, settings):
        assert validate_api_key("sk_test_def:user_123", settings) == "user_123"

    def test_unknown_key(self, settings):
        with pytest.raises(HTTPException) as exc_info:
            validate_api_key("sk_live_nope", settings)
        assert exc_info.value.status_code == 401

    def test_empty_user_part(self, settings):
        with pytest.raises(HTTPException) as exc_info:
            validate_api_key("sk_test_abc: ", settings)
        assert exc_info.value.detail == "API key missing user ID"

    def test_no_keys_configured(self):
        with pytest.raises(HTTPException) as exc_info:
            validate_api_key("sk_test_abc", Settings(environment="test", _env_file=None))
        assert exc_info.value.status_code == 401


class TestValidateJwt:
    def test_requires_bearer_scheme(self, settings):
        with pytest.raises(HTTPException) as exc_info:
            validate_jwt("Token abc", settings)
        assert exc_info.value.status_code == 401

    def test_missing_clerk_domain_is_server_error(self):
        with pytest.raises(HTTPException) as exc_info:
            validate_jwt("Bearer abc", Settings(environment="test", _env_file=None))
        assert exc_info.value.status_code == 500

    def test_valid_token_returns_subject(self, settings):
        jwks_client = MagicMock()
        with patch("backend.auth.get_jwks_client", return_value=jwks_client), \
                patch("backend.auth.jwt.decode", return_value={"sub": "user_abc"}) as mock_decode:
            assert validate_jwt("Bearer token123", settings) == "user_abc"

        jwks_client.get_signing_key_from_jwt.assert_called_once_with("token123")
        assert mock_decode.call_args.kwargs["algorithms"] == ["RS256"]

    def test_expired_token(self, settings):
        with patch("backend.auth.get_jwks_client", return_value=MagicMock()), \
                patch("backend.auth.jwt.decode", side_effect=jwt.ExpiredSignatureError("expired")):
            with pytest.raises(HTTPException) as exc_info:
                validate_jwt("Bearer token123", settings)
        assert exc_info.value.detail == "Token expired"

    def test_invalid_token(self, settings):
        with patch("backend.auth.get_jwks_client", return_value=MagicMock()), \
                patch("backend.auth.jwt.decode", side_effect=jwt.InvalidTokenError("bad")):
            with pytest.raises(HTTPException) as exc_info:
                validate_jwt("Bearer token123", settings)
        assert exc_info.value.status_code == 401

    def test_jwks_fetch_failure(self, settings):
        jwks_client = MagicMock()
        jwks_client.get_signing_key_from_jwt.side_effect = jwt.PyJWKClientError("unreachable")
        with patch("backend.auth.get_jwks_client", return_value=jwks_client):
            with pytest.raises(HTTPException) as exc_info:
                validate_jwt("Bearer token123", settings)
        assert exc_info.value.status_code == 401

    def test_token_without_subject(self, settings):
        with patch("backend.auth.get_jwks_client", return_value=MagicMock()), \
                patch("backend.auth.jwt.decode", return_value={}):
            with pytest.raises(HTTPException) as exc_info:
                validate_jwt("Bearer token123", settings)
        assert exc_info.value.detail == "Token missing user ID"


class TestGetJwksClient:
    def test_none_without_domain(self):
        assert get_jwks_client(Settings(environment="test", _env_file=None)) is None

    def test_cached_per_url(self, settings, monkeypatch):
        monkeypatch.setattr("backend.auth._jwks_client", None)
        monkeypatch.setattr("backend.auth._jwks_url", "")
        with patch("backend.auth.jwt.PyJWKClient") as mock_cls:
            first = get_jwks_client(settings)
            second = get_jwks_client(settings)

        assert first is second
        mock_cls.assert_called_once_with("https://example.clerk.accounts.dev/.well-known/jwks.json")


class TestGetCurrentUser:
    @pytest.mark.asyncio
    async def test_api_key_takes_precedence(self, settings):
        with patch("backend.auth.get_settings", return_value=settings):
            user_id = await get_current_user(authorization="Bearer ignored", x_api_key="sk_test_abc:user_9")
        assert user_id == "user_9"

    @pytest.mark.asyncio
    async def test_missing_credentials(self, settings):
        with patch("backend.auth.get_settings", return_value=settings):
            with pytest.raises(HTTPException) as exc_info:
                await get_current_user(authorization=None, x_api_key=None)
        assert exc_info.value.status_code == 401
