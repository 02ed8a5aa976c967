"""
Vehicle <-> service association.
"""
from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from washbay.database import Base


class VehicleService(Base):
    """One service attached to one vehicle; unique per pair."""

    __tablename__ = "vehicle_services"
    __table_args__ = (
        UniqueConstraint("vehicle_id", "service_id", name="uq_vehicle_service"),
    )

    id = Column(Integer, primary_key=True, index=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True)
    service_id = Column(Integer, ForeignKey("services.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationships
    vehicle = relationship("Vehicle", back_populates="service_links")
    service = relationship("Service", lazy="selectin")
