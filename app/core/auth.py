# =============================================
# app/core/auth.py
# =============================================
from fastapi import Depends, Header
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from uuid import UUID
import logging

from app.config.database import get_db
from app.core.exceptions import AuthenticationError
from app.core.security import decode_access_token
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    x_auth_token: Optional[str] = Header(default=None, alias="x-auth-token"),
    db: AsyncSession = Depends(get_db)
) -> UUID:
    """
    Resolve the caller's user id from the request credential.

    Accepts ``Authorization: Bearer <token>`` or the legacy
    ``x-auth-token`` header.
    """
    token = credentials.credentials if credentials else x_auth_token
    if not token:
        raise AuthenticationError("No token, authorization denied")

    payload = decode_access_token(token)
    if payload is None or payload.get("type") != "access":
        raise AuthenticationError()

    try:
        user_id = UUID(str(payload.get("sub")))
    except ValueError:
        raise AuthenticationError()

    if not await UserRepository(db).exists(user_id):
        logger.warning(f"Token presented for unknown user {user_id}")
        raise AuthenticationError()

    return user_id
