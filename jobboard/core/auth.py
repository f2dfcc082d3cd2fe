"""
Authentication Utility - JWT handling.

Provides:
- JWT token creation/verification
- FastAPI dependencies for optional login and admin-only routes

Tokens carry {"username": ..., "isAdmin": ...}. A missing or bad token is
not an error by itself; it makes the caller anonymous.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from jobboard.core.config import get_settings
from jobboard.core.errors import UnauthorizedError
from jobboard.core.logging import get_logger

logger = get_logger(__name__)

# Bearer token extractor; anonymous callers are allowed through
bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token."""
    settings = get_settings()
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.jwt_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Optional[dict]:
    """Decode and verify JWT token."""
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[dict]:
    """
    FastAPI dependency - caller identity from the bearer token, or None.

    Usage:
        @app.get("/jobs")
        async def route(user: Optional[dict] = Depends(get_current_user)):
            ...
    """
    if credentials is None:
        return None

    payload = decode_token(credentials.credentials)
    if not payload or not payload.get("username"):
        logger.debug("Ignoring invalid bearer token")
        return None

    return {"username": payload["username"], "is_admin": payload.get("isAdmin") is True}


async def ensure_admin(user: Optional[dict] = Depends(get_current_user)) -> dict:
    """Dependency - Require a logged-in admin."""
    if not user or not user["is_admin"]:
        raise UnauthorizedError()
    return user
