"""
Service model for database.
"""
from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey, Enum as SQLEnum
from sqlalchemy.sql import func
from washbay.database import Base
import enum


class ServiceCategory(str, enum.Enum):
    """Vehicle category a service is priced for."""
    SMALL_CAR = "small-car"
    MEDIUM_CAR = "medium-car"
    LARGE_CAR = "large-car"
    SUV = "suv"
    VAN = "van"
    PICKUP = "pickup"
    MOTORCYCLE = "motorcycle"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


CATEGORY_LABELS = {
    ServiceCategory.SMALL_CAR: "Small car",
    ServiceCategory.MEDIUM_CAR: "Medium car",
    ServiceCategory.LARGE_CAR: "Large car",
    ServiceCategory.SUV: "SUV",
    ServiceCategory.VAN: "Van",
    ServiceCategory.PICKUP: "Pickup",
    ServiceCategory.MOTORCYCLE: "Motorcycle",
}


class Service(Base):
    """Priced catalog entry that can be attached to vehicles."""

    __tablename__ = "services"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    price = Column(Numeric(10, 2), nullable=False)
    category = Column(SQLEnum(ServiceCategory), nullable=False)
    user_id = Column(Integer, ForeignKey("profiles.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
