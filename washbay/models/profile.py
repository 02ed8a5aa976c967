"""
Profile model for database.
"""
from sqlalchemy import Column, Integer, String, DateTime, Enum as SQLEnum
from sqlalchemy.sql import func
from washbay.database import Base
import enum


class ProfileRole(str, enum.Enum):
    """Profile role enumeration."""
    ADMIN = "admin"
    USER = "user"


class Profile(Base):
    """Authenticated actor's identity and role."""

    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, nullable=False, index=True)
    hashed_password = Column(String, nullable=False)
    role = Column(SQLEnum(ProfileRole), default=ProfileRole.USER, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
