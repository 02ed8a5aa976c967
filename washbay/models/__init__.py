"""
SQLAlchemy database models.
"""
from washbay.models.profile import Profile, ProfileRole
from washbay.models.service import Service, ServiceCategory
from washbay.models.vehicle import Vehicle, VehicleStatus
from washbay.models.vehicle_service import VehicleService

__all__ = [
    "Profile", "ProfileRole",
    "Service", "ServiceCategory",
    "Vehicle", "VehicleStatus",
    "VehicleService",
]
