"""
Pydantic schemas for Vehicle.
"""
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from washbay.models.vehicle import VehicleStatus
from washbay.schemas.service import Service, _not_blank


def to_millis(value: datetime) -> int:
    """Milliseconds since epoch; naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp() * 1000)


class VehicleBase(BaseModel):
    """Base vehicle schema with common fields."""
    license_plate: str
    customer_name: str
    customer_phone: str

    check_fields = field_validator("license_plate", "customer_name", "customer_phone")(_not_blank)


class VehicleCreate(VehicleBase):
    """Schema for checking a vehicle in, optionally with services."""
    service_ids: list[int] = Field(default_factory=list)


class VehicleUpdate(BaseModel):
    """Schema for editing a vehicle's contact fields."""
    license_plate: Optional[str] = None
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None

    check_fields = field_validator("license_plate", "customer_name", "customer_phone")(_not_blank)


class Vehicle(VehicleBase):
    """Schema for vehicle responses, services always resolved."""
    id: int
    timestamp: int
    status: VehicleStatus = VehicleStatus.WAITING
    services: list[Service] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)

    @field_validator("timestamp", mode="before")
    @classmethod
    def _timestamp_to_millis(cls, value):
        if isinstance(value, datetime):
            return to_millis(value)
        return value

    @computed_field
    @property
    def total_price(self) -> Decimal:
        return sum((service.price for service in self.services), Decimal("0"))


class StatusUpdate(BaseModel):
    status: VehicleStatus


class StatusCounts(BaseModel):
    """Dashboard statistics panel."""
    waiting: int = 0
    in_progress: int = 0
    completed: int = 0


class VehicleNotification(BaseModel):
    """Pickup message ready to send to the customer."""
    phone: str
    message: str
    link: str
