"""
Pydantic schemas for request/response validation.
"""
from washbay.schemas.service import ServiceBase, ServiceCreate, ServiceUpdate, Service, Category
from washbay.schemas.vehicle import (
    VehicleBase, VehicleCreate, VehicleUpdate, Vehicle, StatusUpdate, StatusCounts, VehicleNotification,
)
from washbay.schemas.profile import ProfileBase, ProfileCreate, Profile, CurrentProfile, RoleUpdate, Token, LoginRequest
from washbay.schemas.report import ReportRow, Report
from washbay.schemas.plate import PlateText, PlateRecognition

__all__ = [
    "ServiceBase", "ServiceCreate", "ServiceUpdate", "Service", "Category",
    "VehicleBase", "VehicleCreate", "VehicleUpdate", "Vehicle", "StatusUpdate", "StatusCounts",
    "VehicleNotification",
    "ProfileBase", "ProfileCreate", "Profile", "CurrentProfile", "RoleUpdate", "Token", "LoginRequest",
    "ReportRow", "Report",
    "PlateText", "PlateRecognition",
]
