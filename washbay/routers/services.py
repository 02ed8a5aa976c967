"""
Service catalog routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from washbay.database import get_db
from washbay.models.profile import Profile
from washbay.schemas.service import Service as ServiceSchema, ServiceCreate, Category
from washbay.auth import get_current_profile
from washbay.services import catalog_service

router = APIRouter(prefix="/services", tags=["services"])


@router.get("/", response_model=List[ServiceSchema])
async def get_services(
    db: AsyncSession = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile)
):
    """
    Get the whole catalog, alphabetical by name.
    """
    return await catalog_service.list_services(db, current_profile)


@router.get("/categories", response_model=List[Category])
async def get_categories(current_profile: Profile = Depends(get_current_profile)):
    """
    The fixed list of vehicle categories.
    """
    return catalog_service.list_categories()


@router.get("/{service_id}", response_model=ServiceSchema)
async def get_service(
    service_id: int,
    db: AsyncSession = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile)
):
    """
    Get a specific service by ID.
    """
    return await catalog_service.get_service(db, current_profile, service_id)


@router.post("/", response_model=ServiceSchema, status_code=status.HTTP_201_CREATED)
async def create_service(
    service: ServiceCreate,
    db: AsyncSession = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile)
):
    """
    Add a service to the catalog.
    """
    return await catalog_service.create_service(
        db, current_profile, service.name, service.price, service.category
    )
