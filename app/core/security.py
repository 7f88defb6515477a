# =============================================
# app/core/security.py
# =============================================
"""Security utilities for authentication"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
import hashlib
from urllib.parse import urlencode

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.config.settings import get_settings

settings = get_settings()

# =============================================
# PASSWORD HASHING
# =============================================
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a hashed password"""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False

def get_password_hash(password: str) -> str:
    """Hash a password with a fresh random salt"""
    return pwd_context.hash(password)

# =============================================
# JWT TOKEN MANAGEMENT
# =============================================

def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token"""
    to_encode = data.copy()
    now = datetime.now(timezone.utc)

    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({
        "exp": expire,
        "iat": now,
        "type": "access"
    })

    return jwt.encode(
        to_encode,
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM
    )

def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Verify signature and expiry; None when the token is unusable"""
    try:
        return jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM]
        )
    except JWTError:
        return None

# =============================================
# AVATARS
# =============================================

GRAVATAR_BASE_URL = "https://www.gravatar.com/avatar/"

def gravatar_url(email: str, size: int = 200, rating: str = "pg", default: str = "mm") -> str:
    """Gravatar URL for an email (same email always gives the same URL)"""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    query = urlencode({"s": size, "r": rating, "d": default})
    return f"{GRAVATAR_BASE_URL}{digest}?{query}"
