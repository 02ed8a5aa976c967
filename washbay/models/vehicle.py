"""
Vehicle model for database.
"""
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Enum as SQLEnum
from sqlalchemy.orm import relationship
from washbay.database import Base
import enum


class VehicleStatus(str, enum.Enum):
    """Position of a vehicle in the wash pipeline."""
    WAITING = "waiting"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Vehicle(Base):
    """Vehicle database model."""

    __tablename__ = "vehicles"

    id = Column(Integer, primary_key=True, index=True)
    license_plate = Column(String, nullable=False, index=True)
    customer_name = Column(String, nullable=False, index=True)
    customer_phone = Column(String, nullable=False)
    timestamp = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    status = Column(SQLEnum(VehicleStatus), default=VehicleStatus.WAITING, nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("profiles.id", ondelete="SET NULL"), nullable=True)

    # Relationships
    service_links = relationship(
        "VehicleService",
        back_populates="vehicle",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def services(self):
        """Attached services, skipping links whose service row is gone."""
        return [link.service for link in self.service_links if link.service is not None]
