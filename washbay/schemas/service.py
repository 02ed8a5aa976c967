"""
Pydantic schemas for Service.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from decimal import Decimal
from typing import Optional
from washbay.models.service import ServiceCategory


def _not_blank(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    return value


class ServiceBase(BaseModel):
    """Base service schema with common fields."""
    name: str
    price: Decimal
    category: ServiceCategory = ServiceCategory.SMALL_CAR

    check_name = field_validator("name")(_not_blank)


class ServiceCreate(ServiceBase):
    """Schema for creating a service."""
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)


class ServiceUpdate(BaseModel):
    """Schema for updating a service."""
    name: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    category: Optional[ServiceCategory] = None

    check_name = field_validator("name")(_not_blank)


class Service(ServiceBase):
    """Schema for service responses."""
    id: int

    model_config = ConfigDict(from_attributes=True)


class Category(BaseModel):
    """One entry of the fixed category list."""
    value: ServiceCategory
    label: str
