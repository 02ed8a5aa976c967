"""
Builders for in-memory vehicle and service snapshots.
"""
from decimal import Decimal

from washbay.models.service import ServiceCategory
from washbay.models.vehicle import VehicleStatus
from washbay.schemas.service import Service
from washbay.schemas.vehicle import Vehicle


def make_service(id, name="Wash", price="10.00", category=ServiceCategory.SMALL_CAR):
    return Service(id=id, name=name, price=Decimal(price), category=category)


def make_vehicle(
    id,
    plate="ABC-1234",
    name="Ana Souza",
    phone="(11) 98765-4321",
    timestamp=None,
    status=VehicleStatus.COMPLETED,
    services=(),
):
    return Vehicle(
        id=id,
        license_plate=plate,
        customer_name=name,
        customer_phone=phone,
        timestamp=timestamp if timestamp is not None else 1_700_000_000_000 + id * 1000,
        status=status,
        services=list(services),
    )
