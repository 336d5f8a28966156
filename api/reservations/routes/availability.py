"""Facility, opening hours and availability routes.

Public endpoints. The slot grid is visible to everyone, no auth required.
"""

import logging
from datetime import date, datetime

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from reservations.core.clock import get_reference_now
from reservations.core.config import settings
from reservations.core.database import get_db
from reservations.schemas import (
    AvailabilityCheckOut,
    AvailabilityCheckRequest,
    AvailabilityOut,
    BookingOut,
    FacilityOut,
    OpeningHoursOut,
    SlotOut,
)
from reservations.services.availability import find_conflict, slot_statuses
from reservations.services.booking_lookup import bookings_for_day
from reservations.services.booking_rules import check_interval
from reservations.services.facilities import FACILITIES, facility_name, get_facility
from reservations.services.operating_hours import end_label, opening_hours, resolve_season

logger = logging.getLogger(__name__)

router = APIRouter(tags=["availability"])


def _resolve_facility(key_or_name: str | None) -> str | None:
    """Display name for a facility query parameter; 404 if it names nothing we know."""
    if key_or_name is None:
        return None
    if get_facility(key_or_name) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Facility not found")
    return facility_name(key_or_name)


@router.get("/facilities", response_model=list[FacilityOut])
async def list_facilities():
    return list(FACILITIES)


@router.get("/opening-hours", response_model=OpeningHoursOut)
async def get_opening_hours(
    query_date: date = Query(..., alias="date", description="Date in YYYY-MM-DD format"),
):
    summer_months = settings.summer_month_set
    grid = opening_hours(query_date, summer_months)
    return OpeningHoursOut(
        date=query_date,
        season=resolve_season(query_date, summer_months).value,
        opening=grid[0],
        closing=grid[-1],
        start_hours=grid[:-1],
        end_hours=grid[1:],
    )


@router.get("/availability", response_model=AvailabilityOut)
async def get_availability(
    query_date: date = Query(..., alias="date", description="Date in YYYY-MM-DD format"),
    facility: str | None = Query(None, description="Facility key or name. Omit for the whole venue."),
    db: AsyncSession = Depends(get_db),
    now: datetime = Depends(get_reference_now),
):
    """Return the slot grid for a date.

    With a facility, only that facility's bookings reserve slots. Without
    one, any booking on the day reserves the slot and the grid reports
    which facility holds it.
    """
    name = _resolve_facility(facility)
    bookings = await bookings_for_day(db, query_date)
    summer_months = settings.summer_month_set

    statuses = slot_statuses(query_date, bookings, now, facility=name, summer_months=summer_months)
    return AvailabilityOut(
        date=query_date,
        facility=name,
        season=resolve_season(query_date, summer_months).value,
        slots=[SlotOut.model_validate(s) for s in statuses],
    )


@router.post("/availability/check", response_model=AvailabilityCheckOut)
async def check_availability(
    body: AvailabilityCheckRequest,
    db: AsyncSession = Depends(get_db),
):
    """Decide whether an interval is free, reporting the first conflicting booking if not."""
    name = _resolve_facility(body.facility)
    end_time = body.end_time or end_label(body.start_time, body.duration_hours)

    violation = check_interval(body.date, body.start_time, end_time, settings.summer_month_set)
    if violation:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=[{"rule": violation.rule, "message": violation.message}],
        )

    bookings = await bookings_for_day(db, body.date)

    conflict = find_conflict(
        body.date,
        body.start_time,
        end_time,
        bookings,
        facility=name,
        exclude_id=body.exclude_booking_id,
    )
    if conflict is not None:
        logger.debug("Conflict for %s %s-%s: booking %s", name or "venue", body.start_time, end_time, conflict.id)

    return AvailabilityCheckOut(
        available=conflict is None,
        start_time=body.start_time,
        end_time=end_time,
        facility=name,
        conflict=BookingOut.model_validate(conflict) if conflict is not None else None,
    )
