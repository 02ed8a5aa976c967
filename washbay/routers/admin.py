"""
Admin routes: users, vehicle edits and service edits.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from washbay.database import get_db
from washbay.models.profile import Profile
from washbay.schemas.profile import Profile as ProfileSchema, RoleUpdate
from washbay.schemas.service import Service as ServiceSchema, ServiceUpdate
from washbay.schemas.vehicle import Vehicle as VehicleSchema, VehicleUpdate
from washbay.auth import get_current_admin
from washbay.services import catalog_service, lifecycle_service, profile_service

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/users", response_model=List[ProfileSchema])
async def get_users(
    db: AsyncSession = Depends(get_db),
    current_admin: Profile = Depends(get_current_admin)
):
    """
    All profiles ordered by email.
    """
    return await profile_service.list_profiles(db, current_admin)


@router.patch("/users/{profile_id}/role", response_model=ProfileSchema)
async def update_user_role(
    profile_id: int,
    update: RoleUpdate,
    db: AsyncSession = Depends(get_db),
    current_admin: Profile = Depends(get_current_admin)
):
    """
    Change a profile's role.
    """
    return await profile_service.update_role(db, current_admin, profile_id, update.role)


@router.put("/vehicles/{vehicle_id}", response_model=VehicleSchema)
async def update_vehicle(
    vehicle_id: int,
    vehicle_update: VehicleUpdate,
    db: AsyncSession = Depends(get_db),
    current_admin: Profile = Depends(get_current_admin)
):
    """
    Edit a vehicle's plate and customer contact.
    """
    update_data = vehicle_update.model_dump(exclude_unset=True)
    return await lifecycle_service.update_vehicle(db, current_admin, vehicle_id, **update_data)


@router.put("/services/{service_id}", response_model=ServiceSchema)
async def update_service(
    service_id: int,
    service_update: ServiceUpdate,
    db: AsyncSession = Depends(get_db),
    current_admin: Profile = Depends(get_current_admin)
):
    """
    Edit a catalog service.
    """
    update_data = service_update.model_dump(exclude_unset=True)
    return await catalog_service.update_service(db, current_admin, service_id, **update_data)
