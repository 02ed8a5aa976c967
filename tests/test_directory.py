import unittest
from decimal import Decimal

from tests.factories import make_service, make_vehicle
from washbay.models.vehicle import VehicleStatus
from washbay.services.directory_service import VehicleDirectory


class TestVehicleDirectory(unittest.TestCase):

    def setUp(self):
        self.first = make_vehicle(1, plate="ABC-1234", name="Ana Souza", phone="11 98765-4321",
                                  timestamp=1000, status=VehicleStatus.WAITING)
        self.second = make_vehicle(2, plate="XYZ-9999", name="Bruno Lima", phone="21 91234-0000",
                                   timestamp=2000, status=VehicleStatus.IN_PROGRESS)
        self.third = make_vehicle(3, plate="JKL-5555", name="Carla Dias", phone="31 90000-1111",
                                  timestamp=3000, status=VehicleStatus.COMPLETED)
        self.directory = VehicleDirectory(
            [self.first, self.third, self.second],
            [make_service(1, "wax"), make_service(2, "Basic Wash"), make_service(3, "Polish")],
        )

    def test_list_is_newest_first(self):
        self.assertEqual([v.id for v in self.directory.list()], [3, 2, 1])

    def test_list_ties_broken_by_id(self):
        directory = VehicleDirectory([make_vehicle(1, timestamp=5), make_vehicle(2, timestamp=5)])
        self.assertEqual([v.id for v in directory.list()], [2, 1])

    def test_blank_search_equals_list(self):
        self.assertEqual(self.directory.search(""), self.directory.list())
        self.assertEqual(self.directory.search("   "), self.directory.list())
        self.assertEqual(self.directory.search(None), self.directory.list())

    def test_search_plate_case_insensitive(self):
        directory = VehicleDirectory([self.first, self.second])
        self.assertEqual(directory.search("abc"), [self.first])

    def test_search_customer_name(self):
        self.assertEqual(self.directory.search("BRUNO"), [self.second])

    def test_search_phone(self):
        self.assertEqual(self.directory.search("90000"), [self.third])

    def test_search_no_match(self):
        self.assertEqual(self.directory.search("nothing"), [])

    def test_services_alphabetical(self):
        names = [s.name for s in self.directory.list_services()]
        self.assertEqual(names, ["Basic Wash", "Polish", "wax"])

    def test_active_excludes_completed(self):
        self.assertEqual([v.id for v in self.directory.active()], [2, 1])

    def test_search_active_only(self):
        self.assertEqual([v.id for v in self.directory.search("", active_only=True)], [2, 1])
        self.assertEqual(self.directory.search("carla", active_only=True), [])
        self.assertEqual(self.directory.search("ana", active_only=True), [self.first])

    def test_status_counts(self):
        counts = self.directory.status_counts()
        self.assertEqual((counts.waiting, counts.in_progress, counts.completed), (1, 1, 1))

    def test_status_counts_empty(self):
        counts = VehicleDirectory([]).status_counts()
        self.assertEqual((counts.waiting, counts.in_progress, counts.completed), (0, 0, 0))


class TestTotalPrice(unittest.TestCase):

    def test_total_is_sum_of_attached_prices(self):
        vehicle = make_vehicle(1, services=[make_service(1, "Wash", "15.00"), make_service(2, "Wax", "20.50")])
        self.assertEqual(vehicle.total_price, Decimal("35.50"))

    def test_total_follows_current_services(self):
        vehicle = make_vehicle(1, services=[make_service(1, "Wash", "15.00")])
        vehicle.services.append(make_service(2, "Wax", "20.00"))
        self.assertEqual(vehicle.total_price, Decimal("35.00"))
        vehicle.services.pop(0)
        self.assertEqual(vehicle.total_price, Decimal("20.00"))

    def test_no_services_total_zero(self):
        self.assertEqual(make_vehicle(1).total_price, Decimal("0"))


if __name__ == "__main__":
    unittest.main()
