"""
Bearer token verification for the booking endpoints.

A token is accepted only when its signature is valid, it has not expired and
a session row still carries it. Token issuance belongs to the auth service;
create_access_token is kept for seeding sessions and for the test suite.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.core.config import get_settings
from hotel_booking.core.logging import get_logger
from hotel_booking.db.session import get_db
from hotel_booking.models.session import Session

logger = get_logger(__name__)
bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    settings = get_settings()
    payload = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    payload.update({"exp": expire, "iat": datetime.now(timezone.utc)})
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> dict:
    settings = get_settings()
    return jwt.decode(
        token,
        settings.SECRET_KEY,
        algorithms=[settings.ALGORITHM],
        options={"require": ["exp", "sub"]},
    )


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> int:
    """Resolve the authenticated user id or fail with 401."""
    if credentials is None:
        raise _unauthorized()

    token = credentials.credentials
    try:
        payload = decode_access_token(token)
        user_id = int(payload["sub"])
    except jwt.ExpiredSignatureError:
        logger.info("token_rejected", reason="expired")
        raise _unauthorized()
    except (jwt.InvalidTokenError, ValueError):
        logger.info("token_rejected", reason="invalid")
        raise _unauthorized()

    result = await db.execute(
        select(Session.id).where(Session.token == token, Session.user_id == user_id)
    )
    if result.first() is None:
        logger.info("token_rejected", reason="no_session", user_id=user_id)
        raise _unauthorized()

    return user_id
