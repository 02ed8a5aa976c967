"""
Vehicle lifecycle: check-in, status changes, service links, removal.

Status changes are unrestricted: any of waiting, in-progress and completed
can follow any other.  Every mutation commits and then reloads the vehicle,
so callers always get confirmed state back.
"""
import logging
from typing import Iterable, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from washbay.exceptions import NotFoundError, RemoteError, ValidationError
from washbay.models.profile import Profile
from washbay.models.service import Service
from washbay.models.vehicle import Vehicle, VehicleStatus
from washbay.models.vehicle_service import VehicleService
from washbay.plates import normalize_plate
from washbay.services.access_service import require_actor, require_admin
from washbay.services.directory_service import fetch_service, fetch_vehicle

logger = logging.getLogger(__name__)


def _required(value: Optional[str], field: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValidationError(f"{field} is required")
    return value


async def _check_services_exist(db: AsyncSession, service_ids: List[int]) -> None:
    result = await db.execute(select(Service.id).where(Service.id.in_(service_ids)))
    found = set(result.scalars().all())
    missing = [service_id for service_id in service_ids if service_id not in found]
    if missing:
        raise NotFoundError(f"Service not found: {', '.join(str(m) for m in missing)}")


async def create_vehicle(
    db: AsyncSession,
    actor: Optional[Profile],
    license_plate: str,
    customer_name: str,
    customer_phone: str,
    service_ids: Iterable[int] = (),
) -> Vehicle:
    """Check a vehicle in, then link its services.

    The vehicle row and its service links are written in two separate
    commits.  If linking fails the vehicle stays behind without services
    and a ``RemoteError`` naming it is raised; nothing is rolled back.
    """
    require_actor(actor)
    plate = normalize_plate(license_plate)
    name = _required(customer_name, "Customer name")
    phone = _required(customer_phone, "Customer phone")
    service_ids = list(dict.fromkeys(service_ids))

    if service_ids:
        await _check_services_exist(db, service_ids)

    # Phase 1: the vehicle itself
    vehicle = Vehicle(
        license_plate=plate,
        customer_name=name,
        customer_phone=phone,
        status=VehicleStatus.WAITING,
        user_id=actor.id,
    )
    db.add(vehicle)
    await db.commit()
    vehicle_id = vehicle.id
    logger.info("Vehicle %s checked in (plate %s) by profile %s", vehicle_id, plate, actor.id)

    # Phase 2: the service links
    if service_ids:
        try:
            for service_id in service_ids:
                db.add(VehicleService(vehicle_id=vehicle_id, service_id=service_id))
            await db.commit()
        except SQLAlchemyError as exc:
            await db.rollback()
            logger.exception("Vehicle %s was created but linking its services failed", vehicle_id)
            raise RemoteError(
                f"Vehicle {vehicle_id} was saved without services; linking them failed"
            ) from exc

    return await fetch_vehicle(db, vehicle_id)


async def set_status(
    db: AsyncSession, actor: Optional[Profile], vehicle_id: int, status: VehicleStatus
) -> Vehicle:
    """Overwrite the status, whatever it was before."""
    require_actor(actor)
    vehicle = await fetch_vehicle(db, vehicle_id)
    previous = vehicle.status
    vehicle.status = VehicleStatus(status)
    await db.commit()
    logger.info("Vehicle %s status %s -> %s", vehicle_id, previous.value, vehicle.status.value)
    return await fetch_vehicle(db, vehicle_id)


async def attach_service(
    db: AsyncSession, actor: Optional[Profile], vehicle_id: int, service_id: int
) -> Vehicle:
    """Link a service to a vehicle.  Linking an already linked pair is a no-op."""
    require_actor(actor)
    await fetch_vehicle(db, vehicle_id)
    await fetch_service(db, service_id)

    result = await db.execute(
        select(VehicleService).where(
            VehicleService.vehicle_id == vehicle_id,
            VehicleService.service_id == service_id,
        )
    )
    if result.scalar_one_or_none() is None:
        db.add(VehicleService(vehicle_id=vehicle_id, service_id=service_id))
        try:
            await db.commit()
            logger.info("Service %s attached to vehicle %s", service_id, vehicle_id)
        except IntegrityError:
            # Pair linked concurrently; the unique constraint kept a single row.
            await db.rollback()

    return await fetch_vehicle(db, vehicle_id)


async def detach_service(
    db: AsyncSession, actor: Optional[Profile], vehicle_id: int, service_id: int
) -> Vehicle:
    """Unlink a service.  Unlinking a pair that is not linked is a no-op."""
    require_actor(actor)
    await fetch_vehicle(db, vehicle_id)

    result = await db.execute(
        delete(VehicleService).where(
            VehicleService.vehicle_id == vehicle_id,
            VehicleService.service_id == service_id,
        )
    )
    await db.commit()
    if result.rowcount:
        logger.info("Service %s detached from vehicle %s", service_id, vehicle_id)

    return await fetch_vehicle(db, vehicle_id)


async def remove_vehicle(db: AsyncSession, actor: Optional[Profile], vehicle_id: int) -> None:
    """Hard-delete a vehicle together with its service links."""
    require_actor(actor)
    vehicle = await fetch_vehicle(db, vehicle_id)
    await db.delete(vehicle)
    await db.commit()
    logger.info("Vehicle %s removed by profile %s", vehicle_id, actor.id)


async def update_vehicle(
    db: AsyncSession,
    actor: Optional[Profile],
    vehicle_id: int,
    license_plate: Optional[str] = None,
    customer_name: Optional[str] = None,
    customer_phone: Optional[str] = None,
) -> Vehicle:
    """Admin edit of a vehicle's plate and customer contact."""
    require_admin(actor)
    vehicle = await fetch_vehicle(db, vehicle_id)

    if license_plate is not None:
        vehicle.license_plate = normalize_plate(license_plate)
    if customer_name is not None:
        vehicle.customer_name = _required(customer_name, "Customer name")
    if customer_phone is not None:
        vehicle.customer_phone = _required(customer_phone, "Customer phone")

    await db.commit()
    logger.info("Vehicle %s edited by admin %s", vehicle_id, actor.id)
    return await fetch_vehicle(db, vehicle_id)
