"""
Vehicle and service directory.

``VehicleDirectory`` is an in-memory snapshot of the vehicles (services
already resolved) and the service catalog.  Search, status filtering and
the dashboard counts all run against the snapshot; ``load_directory``
fills it from the database.
"""
import logging
from typing import Iterable, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from washbay.exceptions import NotFoundError
from washbay.models.service import Service
from washbay.models.vehicle import Vehicle, VehicleStatus
from washbay.schemas.service import Service as ServiceSchema
from washbay.schemas.vehicle import StatusCounts, Vehicle as VehicleSchema

logger = logging.getLogger(__name__)


class VehicleDirectory:
    """Read-only view over vehicles and services."""

    def __init__(self, vehicles: Iterable[VehicleSchema], services: Iterable[ServiceSchema] = ()):
        self._vehicles = sorted(vehicles, key=lambda v: (v.timestamp, v.id), reverse=True)
        self._services = sorted(services, key=lambda s: (s.name.lower(), s.id))

    def list(self) -> List[VehicleSchema]:
        """All vehicles, newest first."""
        return list(self._vehicles)

    def search(self, query: Optional[str], active_only: bool = False) -> List[VehicleSchema]:
        """Case-insensitive substring match on plate, customer name or phone.

        With ``active_only`` completed vehicles are left out.
        """
        vehicles = self.active() if active_only else self.list()
        needle = (query or "").strip().lower()
        if not needle:
            return vehicles
        return [
            vehicle for vehicle in vehicles
            if needle in vehicle.license_plate.lower()
            or needle in vehicle.customer_name.lower()
            or needle in vehicle.customer_phone.lower()
        ]

    def list_services(self) -> List[ServiceSchema]:
        """Catalog in alphabetical order."""
        return list(self._services)

    def by_status(self, status: VehicleStatus) -> List[VehicleSchema]:
        return [vehicle for vehicle in self._vehicles if vehicle.status == status]

    def active(self) -> List[VehicleSchema]:
        """Vehicles still on the board (not completed)."""
        return [vehicle for vehicle in self._vehicles if vehicle.status != VehicleStatus.COMPLETED]

    def status_counts(self) -> StatusCounts:
        return StatusCounts(
            waiting=len(self.by_status(VehicleStatus.WAITING)),
            in_progress=len(self.by_status(VehicleStatus.IN_PROGRESS)),
            completed=len(self.by_status(VehicleStatus.COMPLETED)),
        )


async def fetch_vehicle(db: AsyncSession, vehicle_id: int) -> Vehicle:
    """Load one vehicle with its links refreshed from the database."""
    result = await db.execute(
        select(Vehicle)
        .where(Vehicle.id == vehicle_id)
        .execution_options(populate_existing=True)
    )
    vehicle = result.scalar_one_or_none()

    if not vehicle:
        raise NotFoundError("Vehicle not found")

    return vehicle


async def fetch_service(db: AsyncSession, service_id: int) -> Service:
    result = await db.execute(select(Service).where(Service.id == service_id))
    service = result.scalar_one_or_none()

    if not service:
        raise NotFoundError("Service not found")

    return service


async def load_vehicles(db: AsyncSession) -> List[VehicleSchema]:
    result = await db.execute(
        select(Vehicle)
        .order_by(Vehicle.timestamp.desc(), Vehicle.id.desc())
        .execution_options(populate_existing=True)
    )
    return [VehicleSchema.model_validate(vehicle) for vehicle in result.scalars().all()]


async def load_services(db: AsyncSession) -> List[ServiceSchema]:
    result = await db.execute(select(Service).order_by(func.lower(Service.name), Service.id))
    return [ServiceSchema.model_validate(service) for service in result.scalars().all()]


async def load_directory(db: AsyncSession, include_services: bool = True) -> VehicleDirectory:
    """Snapshot of every vehicle and, unless told otherwise, the whole catalog."""
    vehicles = await load_vehicles(db)
    services = await load_services(db) if include_services else []
    logger.debug("Loaded directory: %d vehicles, %d services", len(vehicles), len(services))
    return VehicleDirectory(vehicles, services)
