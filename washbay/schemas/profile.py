"""
Pydantic schemas for Profile and Authentication.
"""
from pydantic import BaseModel, EmailStr, ConfigDict, Field
from datetime import datetime
from typing import Optional
from washbay.models.profile import ProfileRole


class ProfileBase(BaseModel):
    """Base profile schema with common fields."""
    email: EmailStr


class ProfileCreate(ProfileBase):
    """Schema for signing up."""
    password: str = Field(min_length=6, max_length=72)


class Profile(ProfileBase):
    """Schema for profile responses."""
    id: int
    role: ProfileRole = ProfileRole.USER
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class CurrentProfile(Profile):
    """The signed-in profile plus its admin flag."""
    is_admin: bool = False


class RoleUpdate(BaseModel):
    role: ProfileRole


class Token(BaseModel):
    """Schema for authentication token."""
    access_token: str
    token_type: str


class LoginRequest(BaseModel):
    """Schema for login request."""
    email: EmailStr
    password: str
