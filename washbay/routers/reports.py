"""
Report routes.
"""
from datetime import date
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from washbay.database import get_db
from washbay.models.profile import Profile
from washbay.schemas.report import Report
from washbay.auth import get_current_profile
from washbay.services import report_service

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/", response_model=Report)
async def get_report(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    service_ids: List[int] = Query(default=[]),
    db: AsyncSession = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile)
):
    """
    Per-service counts and revenue over completed vehicles.

    Defaults to the current month.  ``service_ids`` may be repeated to
    restrict the report to those services.
    """
    return await report_service.build_report(db, current_profile, start_date, end_date, service_ids)
