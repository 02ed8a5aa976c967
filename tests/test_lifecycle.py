import unittest
from decimal import Decimal
from unittest.mock import AsyncMock, patch

from sqlalchemy import select

from tests import reset_tables
from washbay.database import AsyncSessionLocal
from washbay.exceptions import NotFoundError, RemoteError
from washbay.models.profile import Profile, ProfileRole
from washbay.models.service import Service, ServiceCategory
from washbay.models.vehicle import Vehicle, VehicleStatus
from washbay.services import directory_service, lifecycle_service


class TestLifecycleWithDatabase(unittest.IsolatedAsyncioTestCase):

    async def asyncSetUp(self):
        await reset_tables()
        async with AsyncSessionLocal() as db:
            actor = Profile(email="staff@example.com", hashed_password="x", role=ProfileRole.USER)
            db.add(actor)
            await db.commit()
            self.actor_id = actor.id

    async def vehicles(self):
        async with AsyncSessionLocal() as db:
            result = await db.execute(select(Vehicle))
            return list(result.scalars().all())

    async def test_vehicle_kept_when_linking_services_fails(self):
        async with AsyncSessionLocal() as db:
            actor = await db.get(Profile, self.actor_id)
            with patch.object(lifecycle_service, "_check_services_exist", AsyncMock()):
                with self.assertRaises(RemoteError) as ctx:
                    await lifecycle_service.create_vehicle(db, actor, "abc1234", "Ana", "119", [999])

        vehicles = await self.vehicles()
        self.assertEqual(len(vehicles), 1)
        self.assertIn(f"Vehicle {vehicles[0].id} ", ctx.exception.detail)
        self.assertEqual(vehicles[0].license_plate, "ABC1234")
        self.assertEqual(vehicles[0].status, VehicleStatus.WAITING)
        self.assertEqual(vehicles[0].services, [])

    async def test_unknown_service_creates_nothing(self):
        async with AsyncSessionLocal() as db:
            actor = await db.get(Profile, self.actor_id)
            with self.assertRaises(NotFoundError):
                await lifecycle_service.create_vehicle(db, actor, "abc1234", "Ana", "119", [999])

        self.assertEqual(await self.vehicles(), [])

    async def test_duplicate_service_ids_collapsed(self):
        async with AsyncSessionLocal() as db:
            actor = await db.get(Profile, self.actor_id)
            service = Service(name="Wash", price=Decimal("15.00"), category=ServiceCategory.SUV)
            db.add(service)
            await db.commit()
            vehicle = await lifecycle_service.create_vehicle(
                db, actor, "abc1234", "Ana", "119", [service.id, service.id]
            )
            self.assertEqual([s.name for s in vehicle.services], ["Wash"])


class TestDirectoryLoading(unittest.IsolatedAsyncioTestCase):

    async def asyncSetUp(self):
        await reset_tables()
        async with AsyncSessionLocal() as db:
            for name in ("Banana wax", "apple wash", "Cherry polish"):
                db.add(Service(name=name, price=Decimal("10.00"), category=ServiceCategory.SMALL_CAR))
            db.add(Vehicle(license_plate="ABC1234", customer_name="Ana", customer_phone="119"))
            await db.commit()

    async def test_services_ordered_ignoring_case(self):
        async with AsyncSessionLocal() as db:
            services = await directory_service.load_services(db)
        self.assertEqual([s.name for s in services], ["apple wash", "Banana wax", "Cherry polish"])

    async def test_directory_without_catalog(self):
        async with AsyncSessionLocal() as db:
            directory = await directory_service.load_directory(db, include_services=False)
        self.assertEqual(directory.list_services(), [])
        self.assertEqual([v.license_plate for v in directory.list()], ["ABC1234"])

    async def test_directory_with_catalog(self):
        async with AsyncSessionLocal() as db:
            directory = await directory_service.load_directory(db)
        self.assertEqual(len(directory.list_services()), 3)


if __name__ == "__main__":
    unittest.main()
