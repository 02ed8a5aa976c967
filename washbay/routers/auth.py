"""
Authentication routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from washbay.database import get_db
from washbay.models.profile import Profile
from washbay.schemas.profile import Profile as ProfileSchema, ProfileCreate, CurrentProfile, LoginRequest, Token
from washbay.auth import create_access_token, get_current_profile
from washbay.services import profile_service
from washbay.services.access_service import is_admin

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=ProfileSchema, status_code=status.HTTP_201_CREATED)
async def register(payload: ProfileCreate, db: AsyncSession = Depends(get_db)):
    """
    Sign up.  New profiles get the ``user`` role.
    """
    return await profile_service.register(db, payload.email, payload.password)


@router.post("/login", response_model=Token)
async def login(payload: LoginRequest, db: AsyncSession = Depends(get_db)):
    """
    Exchange email and password for a bearer token.
    """
    profile = await profile_service.authenticate(db, payload.email, payload.password)
    access_token = create_access_token({"sub": str(profile.id)})
    return Token(access_token=access_token, token_type="bearer")


@router.get("/me", response_model=CurrentProfile)
async def me(current_profile: Profile = Depends(get_current_profile)):
    """
    The signed-in profile and whether it may open the admin screens.
    """
    result = CurrentProfile.model_validate(current_profile)
    result.is_admin = is_admin(current_profile)
    return result
