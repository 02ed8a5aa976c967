"""
Profiles: sign-up, login and the admin user list.
"""
import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from washbay.auth import hash_password, verify_password
from washbay.exceptions import AuthRequiredError, NotFoundError, ValidationError
from washbay.models.profile import Profile, ProfileRole
from washbay.services.access_service import require_admin

logger = logging.getLogger(__name__)


async def get_by_email(db: AsyncSession, email: str) -> Optional[Profile]:
    result = await db.execute(select(Profile).where(Profile.email == email))
    return result.scalar_one_or_none()


async def register(db: AsyncSession, email: str, password: str) -> Profile:
    """Create a profile with the ``user`` role."""
    if await get_by_email(db, email):
        raise ValidationError("Email already registered")

    profile = Profile(email=email, hashed_password=hash_password(password), role=ProfileRole.USER)
    db.add(profile)
    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        raise ValidationError("Email already registered") from exc
    await db.refresh(profile)
    logger.info("Profile %s registered", profile.id)
    return profile


async def authenticate(db: AsyncSession, email: str, password: str) -> Profile:
    profile = await get_by_email(db, email)
    if profile is None or not verify_password(password, profile.hashed_password):
        raise AuthRequiredError("Incorrect email or password")
    return profile


async def list_profiles(db: AsyncSession, actor: Optional[Profile]) -> List[Profile]:
    require_admin(actor)
    result = await db.execute(select(Profile).order_by(Profile.email))
    return list(result.scalars().all())


async def update_role(
    db: AsyncSession, actor: Optional[Profile], profile_id: int, role: ProfileRole
) -> Profile:
    """Change a profile's stored role.  Does not grant admin screens."""
    require_admin(actor)
    profile = await db.get(Profile, profile_id)
    if profile is None:
        raise NotFoundError("Profile not found")

    profile.role = ProfileRole(role)
    await db.commit()
    await db.refresh(profile)
    logger.info("Profile %s role set to %s by admin %s", profile_id, profile.role.value, actor.id)
    return profile
