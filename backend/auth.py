"""
Authentication module for Clerk JWT and API key validation.
Provides FastAPI dependencies for securing endpoints.

The retrieval core trusts whatever user id comes out of here; it never
validates credentials itself.

Supports:
- Clerk JWTs: RS256, validated via JWKS, user id from the ``sub`` claim
- API keys: "key" (-> "admin") or "key:user_id"
"""
import logging
from typing import Optional

import jwt
from fastapi import Header, HTTPException

from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)

_jwks_client: Optional[jwt.PyJWKClient] = None
_jwks_url: str = ""


def get_jwks_client(settings: Settings) -> Optional[jwt.PyJWKClient]:
    """Get or create the JWKS client for Clerk JWT validation."""
    global _jwks_client, _jwks_url
    url = settings.clerk_jwks_url
    if not url:
        return None
    if _jwks_client is None or _jwks_url != url:
        _jwks_client = jwt.PyJWKClient(url)
        _jwks_url = url
    return _jwks_client


async def get_current_user(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key"),
) -> str:
    """
    Authenticate via API key OR Clerk JWT.
    Returns user_id string.

    Usage:
        @app.get("/protected")
        async def protected_route(user_id: str = Depends(get_current_user)):
            return {"user_id": user_id}
    """
    settings = get_settings()

    # Option 1: API Key authentication
    if x_api_key:
        return validate_api_key(x_api_key, settings)

    # Option 2: Clerk JWT authentication
    if authorization:
        return validate_jwt(authorization, settings)

    raise HTTPException(
        status_code=401,
        detail="Missing authentication. Provide Authorization header or X-API-Key."
    )


def validate_api_key(api_key: str, settings: Settings) -> str:
    """
    Validate API key and return user_id.

    API key format options:
    - Simple: "sk_test_abc123" -> returns "admin"
    - With user: "sk_test_abc123:user_12345" -> returns "user_12345"
    """
    valid_keys = settings.api_keys_list

    if not valid_keys:
        logger.warning("No API keys configured (API_KEYS env var empty)")
        raise HTTPException(status_code=401, detail="API key authentication not configured")

    key_part = api_key.split(":")[0]

    if key_part not in valid_keys:
        raise HTTPException(status_code=401, detail="Invalid API key")

    # Extract user_id if provided (format: "key:user_id")
    if ":" in api_key:
        user_id = api_key.split(":", 1)[1].strip()
        if not user_id:
            raise HTTPException(status_code=401, detail="API key missing user ID")
        return user_id

    return "admin"


def validate_jwt(authorization: str, settings: Settings) -> str:
    """Validate a Clerk JWT (RS256 via JWKS) and return user_id."""
    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid authorization header format")

    token = authorization.split(" ", 1)[1]
    jwks_client = get_jwks_client(settings)

    if not jwks_client:
        raise HTTPException(
            status_code=500,
            detail="JWT validation not configured (missing CLERK_DOMAIN)"
        )

    try:
        signing_key = jwks_client.get_signing_key_from_jwt(token)
        payload = jwt.decode(
            token,
            signing_key.key,
            algorithms=["RS256"],
            options={"verify_aud": False}
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except (jwt.InvalidTokenError, jwt.PyJWKClientError) as e:
        logger.warning(f"Invalid Clerk JWT: {e}")
        raise HTTPException(status_code=401, detail=f"Invalid token: {str(e)}")

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Token missing user ID")
    return user_id
