"""
Vehicle routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from washbay.database import get_db
from washbay.models.profile import Profile
from washbay.schemas.vehicle import (
    Vehicle as VehicleSchema,
    VehicleCreate,
    StatusUpdate,
    StatusCounts,
    VehicleNotification,
)
from washbay.auth import get_current_profile
from washbay.services import directory_service, lifecycle_service, notification_service

router = APIRouter(prefix="/vehicles", tags=["vehicles"])


@router.get("/", response_model=List[VehicleSchema])
async def get_vehicles(
    q: Optional[str] = None,
    active_only: bool = False,
    db: AsyncSession = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile)
):
    """
    List vehicles newest first, optionally filtered by a search query
    (plate, customer name or phone) and to those not yet completed.
    """
    directory = await directory_service.load_directory(db, include_services=False)
    return directory.search(q, active_only=active_only)


@router.get("/stats", response_model=StatusCounts)
async def get_vehicle_stats(
    db: AsyncSession = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile)
):
    """
    Number of vehicles in each status.
    """
    directory = await directory_service.load_directory(db, include_services=False)
    return directory.status_counts()


@router.get("/{vehicle_id}", response_model=VehicleSchema)
async def get_vehicle(
    vehicle_id: int,
    db: AsyncSession = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile)
):
    """
    Get a specific vehicle by ID.
    """
    return await directory_service.fetch_vehicle(db, vehicle_id)


@router.post("/", response_model=VehicleSchema, status_code=status.HTTP_201_CREATED)
async def create_vehicle(
    vehicle: VehicleCreate,
    db: AsyncSession = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile)
):
    """
    Check a vehicle in with status ``waiting`` and link the chosen services.
    """
    return await lifecycle_service.create_vehicle(
        db,
        current_profile,
        vehicle.license_plate,
        vehicle.customer_name,
        vehicle.customer_phone,
        vehicle.service_ids,
    )


@router.patch("/{vehicle_id}/status", response_model=VehicleSchema)
async def update_vehicle_status(
    vehicle_id: int,
    update: StatusUpdate,
    db: AsyncSession = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile)
):
    """
    Move a vehicle to any status.
    """
    return await lifecycle_service.set_status(db, current_profile, vehicle_id, update.status)


@router.post("/{vehicle_id}/services/{service_id}", response_model=VehicleSchema)
async def attach_service(
    vehicle_id: int,
    service_id: int,
    db: AsyncSession = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile)
):
    """
    Attach a catalog service to a vehicle.
    """
    return await lifecycle_service.attach_service(db, current_profile, vehicle_id, service_id)


@router.delete("/{vehicle_id}/services/{service_id}", response_model=VehicleSchema)
async def detach_service(
    vehicle_id: int,
    service_id: int,
    db: AsyncSession = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile)
):
    """
    Detach a service from a vehicle.
    """
    return await lifecycle_service.detach_service(db, current_profile, vehicle_id, service_id)


@router.delete("/{vehicle_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vehicle(
    vehicle_id: int,
    db: AsyncSession = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile)
):
    """
    Delete a vehicle.
    """
    await lifecycle_service.remove_vehicle(db, current_profile, vehicle_id)
    return None


@router.get("/{vehicle_id}/notification", response_model=VehicleNotification)
async def get_vehicle_notification(
    vehicle_id: int,
    db: AsyncSession = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile)
):
    """
    Pickup message and WhatsApp link for the vehicle's customer.
    """
    vehicle = await directory_service.fetch_vehicle(db, vehicle_id)
    return notification_service.build_notification(VehicleSchema.model_validate(vehicle))
