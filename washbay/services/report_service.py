"""
Revenue reports over completed vehicles.

Rows are keyed by service *name*, not id: two catalog entries that share a
name land in the same row.  Revenue is summed with ``Decimal`` and only
rounded for display.
"""
import logging
from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import Collection, Dict, Iterable, List, Optional, Tuple
from zoneinfo import ZoneInfo

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from washbay.config import get_settings
from washbay.exceptions import ValidationError
from washbay.models.profile import Profile
from washbay.models.vehicle import Vehicle, VehicleStatus
from washbay.schemas.report import Report, ReportRow
from washbay.schemas.vehicle import Vehicle as VehicleSchema
from washbay.services.access_service import require_actor

logger = logging.getLogger(__name__)


def aggregate(
    vehicles: Iterable[VehicleSchema],
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    service_ids: Optional[Collection[int]] = None,
) -> List[ReportRow]:
    """Count and sum attached services per service name.

    ``vehicles`` must already be limited to completed vehicles inside
    ``[start, end]``; the range is not checked again here.  An empty
    ``service_ids`` means every service counts.
    """
    wanted = set(service_ids or ())
    rows: Dict[str, ReportRow] = {}

    for vehicle in vehicles:
        for service in vehicle.services or ():
            if service is None:
                continue
            if wanted and service.id not in wanted:
                continue
            row = rows.get(service.name)
            if row is None:
                row = rows[service.name] = ReportRow(service_name=service.name)
            row.count += 1
            row.total_revenue += Decimal(service.price)

    return list(rows.values())


def default_range(today: date) -> Tuple[date, date]:
    """First day of the current month through today."""
    return today.replace(day=1), today


def day_bounds(start_date: date, end_date: date, tz_name: str) -> Tuple[datetime, datetime]:
    """Expand local calendar days to an inclusive UTC instant range."""
    tz = ZoneInfo(tz_name)
    start = datetime.combine(start_date, time.min, tzinfo=tz).astimezone(timezone.utc)
    end = datetime.combine(end_date, time.max, tzinfo=tz).astimezone(timezone.utc)
    return start, end


async def load_completed(db: AsyncSession, start: datetime, end: datetime) -> List[VehicleSchema]:
    """Completed vehicles checked in within ``[start, end]``."""
    result = await db.execute(
        select(Vehicle)
        .where(
            Vehicle.status == VehicleStatus.COMPLETED,
            Vehicle.timestamp >= start,
            Vehicle.timestamp <= end,
        )
        .order_by(Vehicle.timestamp)
        .execution_options(populate_existing=True)
    )
    return [VehicleSchema.model_validate(vehicle) for vehicle in result.scalars().all()]


async def build_report(
    db: AsyncSession,
    actor: Optional[Profile],
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    service_ids: Optional[Collection[int]] = None,
    today: Optional[date] = None,
) -> Report:
    require_actor(actor)
    settings = get_settings()

    if today is None:
        today = datetime.now(ZoneInfo(settings.timezone)).date()
    default_start, default_end = default_range(today)
    start_date = start_date or default_start
    end_date = end_date or default_end
    if start_date > end_date:
        raise ValidationError("Start date must not be after end date")

    start, end = day_bounds(start_date, end_date, settings.timezone)
    vehicles = await load_completed(db, start, end)
    rows = aggregate(vehicles, start, end, service_ids)
    logger.info(
        "Report %s..%s: %d completed vehicles, %d rows", start_date, end_date, len(vehicles), len(rows)
    )

    return Report(
        start_date=start_date,
        end_date=end_date,
        service_ids=sorted(set(service_ids or ())),
        rows=rows,
        total_count=sum(row.count for row in rows),
        total_revenue=sum((row.total_revenue for row in rows), Decimal("0")),
    )
