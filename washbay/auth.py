"""
Authentication: password hashing, access tokens and the FastAPI
dependencies that resolve the current profile.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.ext.asyncio import AsyncSession

from washbay.config import get_settings
from washbay.database import get_db
from washbay.exceptions import AuthRequiredError
from washbay.models.profile import Profile
from washbay.services.access_service import require_admin

settings = get_settings()

security = HTTPBearer(auto_error=False)


# bcrypt only looks at the first 72 bytes and newer releases refuse longer input.
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(_password_bytes(plain_password), hashed_password.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Sign a JWT carrying ``data`` plus an ``exp`` claim."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> Optional[dict]:
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return None


async def get_current_profile(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> Profile:
    """Resolve the bearer token to a profile or fail with 401."""
    if credentials is None:
        raise AuthRequiredError()

    payload = decode_access_token(credentials.credentials)
    if not payload or not str(payload.get("sub", "")).isdigit():
        raise AuthRequiredError("Invalid or expired token")

    profile = await db.get(Profile, int(payload["sub"]))
    if profile is None:
        raise AuthRequiredError("Profile no longer exists")

    return profile


async def get_current_admin(current_profile: Profile = Depends(get_current_profile)) -> Profile:
    return require_admin(current_profile)
