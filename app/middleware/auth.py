"""
Supabase JWT authentication

Verifies the bearer token issued by Supabase Auth against the project's
public JWKS and exposes the user id as a FastAPI dependency.
"""
import time
import logging
from typing import Optional
from fastapi import HTTPException, Header
from jose import jwt, jwk
from jose.exceptions import JOSEError
import httpx

from app.config import SUPABASE_URL

logger = logging.getLogger(__name__)

_jwks_cache: Optional[dict] = None
_jwks_cache_time: float = 0
JWKS_CACHE_DURATION = 60 * 60  # 1 hour in seconds

JWT_AUDIENCE = "authenticated"
SUPPORTED_ALGORITHMS = ["ES256", "RS256"]


def _auth_base_url() -> str:
    if not SUPABASE_URL:
        raise HTTPException(
            status_code=500,
            detail="Authentication is not properly configured"
        )
    return f"{SUPABASE_URL}/auth/v1"


async def get_jwks() -> dict:
    """
    Fetch and cache the JWKS published by Supabase Auth.
    An expired cache is still used if the refresh fails.
    """
    global _jwks_cache, _jwks_cache_time

    now = time.time()
    if _jwks_cache and (now - _jwks_cache_time) < JWKS_CACHE_DURATION:
        return _jwks_cache

    jwks_url = f"{_auth_base_url()}/.well-known/jwks.json"
    logger.info(f"Fetching JWKS from Supabase: {jwks_url}")

    try:
        async with httpx.AsyncClient() as client:
            response = await client.get(jwks_url, timeout=10.0)
            response.raise_for_status()
            _jwks_cache = response.json()
            _jwks_cache_time = now
            return _jwks_cache
    except httpx.HTTPError as e:
        logger.error(f"Failed to fetch JWKS: {e}")
        if _jwks_cache:
            logger.warning("Using expired JWKS cache due to fetch failure")
            return _jwks_cache
        raise HTTPException(
            status_code=500,
            detail="Failed to fetch authentication keys"
        )


async def verify_token(token: str) -> dict:
    """
    Verify a Supabase JWT and return its payload.

    Raises:
        HTTPException: 401 if the token is invalid, expired or signed by an unknown key
    """
    jwks = await get_jwks()

    try:
        kid = jwt.get_unverified_header(token).get("kid")
        if not kid:
            raise HTTPException(status_code=401, detail="Token missing key ID (kid)")

        key_data = next((k for k in jwks.get("keys", []) if k.get("kid") == kid), None)
        if not key_data:
            raise HTTPException(status_code=401, detail=f"Key with ID '{kid}' not found in JWKS")

        return jwt.decode(
            token,
            jwk.construct(key_data),
            algorithms=SUPPORTED_ALGORITHMS,
            audience=JWT_AUDIENCE,
            issuer=_auth_base_url(),
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token has expired")
    except jwt.JWTClaimsError as e:
        raise HTTPException(status_code=401, detail=f"Token validation failed: {str(e)}")
    except JOSEError as e:
        raise HTTPException(status_code=401, detail=f"Invalid token: {str(e)}")


async def get_current_user_id(
    authorization: Optional[str] = Header(None)
) -> str:
    """
    FastAPI dependency returning the authenticated user's ID ('sub' claim)
    """
    if not authorization:
        raise HTTPException(status_code=401, detail="Authorization header missing")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise HTTPException(
            status_code=401,
            detail="Invalid authorization header format. Expected 'Bearer <token>'"
        )

    payload = await verify_token(token)
    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Invalid token: no user ID")

    return user_id
