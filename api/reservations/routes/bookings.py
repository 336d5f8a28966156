"""Booking routes: create, list, fetch, cancel, with full rules enforcement.

Availability is checked and the booking written in two steps, so two
requests racing for the same slot can both pass the check.
"""

import logging
from datetime import date, datetime

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from reservations.core.clock import get_reference_now
from reservations.core.config import settings
from reservations.core.database import get_db
from reservations.models.booking import Booking, BookingStatus
from reservations.schemas import BookingCreate, BookingOut
from reservations.services.booking_lookup import bookings_for_day
from reservations.services.booking_rules import validate_booking, validate_cancellation
from reservations.services.facilities import BookingType, facility_name, get_facility
from reservations.services.operating_hours import end_label

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("", response_model=BookingOut, status_code=status.HTTP_201_CREATED)
async def create_booking(
    body: BookingCreate,
    db: AsyncSession = Depends(get_db),
    now: datetime = Depends(get_reference_now),
):
    name = facility_name(body.facility)
    existing = await bookings_for_day(db, body.booking_date, facility=name)

    # Run all booking rules
    violations = validate_booking(
        bookings=existing,
        facility=name,
        booking_date=body.booking_date,
        start_time=body.start_time,
        duration_hours=body.duration_hours,
        reference_now=now,
        max_hours=settings.max_booking_hours,
        summer_months=settings.summer_month_set,
    )

    if violations:
        logger.info(
            "Rejected booking for %s on %s at %s: %s",
            name,
            body.booking_date,
            body.start_time,
            ", ".join(v.rule for v in violations),
        )
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=[{"rule": v.rule, "message": v.message} for v in violations],
        )

    booking = Booking(
        facility=name,
        booking_type=get_facility(name).booking_type,
        booking_date=body.booking_date,
        start_time=body.start_time,
        end_time=end_label(body.start_time, body.duration_hours),
        duration_hours=body.duration_hours,
        status=BookingStatus(body.status),
        name=body.name,
        email=body.email,
        phone=body.phone,
        national_id=body.national_id,
        is_resident=body.is_resident,
        with_lights=body.with_lights,
        price=body.price,
    )
    db.add(booking)
    await db.flush()
    await db.refresh(booking)

    logger.info(
        "Booking %s created: %s on %s %s-%s", booking.id, name, booking.booking_date, booking.start_time, booking.end_time
    )
    return booking


@router.get("", response_model=list[BookingOut])
async def list_bookings(
    query_date: date | None = Query(None, alias="date"),
    facility: str | None = Query(None),
    booking_type: BookingType | None = Query(None),
    email: str | None = Query(None),
    include_cancelled: bool = Query(False),
    db: AsyncSession = Depends(get_db),
):
    query = select(Booking)
    if query_date is not None:
        query = query.where(Booking.booking_date == query_date)
    if facility is not None:
        query = query.where(Booking.facility == facility_name(facility))
    if booking_type is not None:
        query = query.where(Booking.booking_type == booking_type)
    if email is not None:
        query = query.where(Booking.email == email)
    if not include_cancelled:
        query = query.where(Booking.status != BookingStatus.CANCELLED)

    result = await db.execute(query.order_by(Booking.booking_date, Booking.start_time).limit(200))
    return result.scalars().all()


@router.get("/{booking_id}", response_model=BookingOut)
async def get_booking(
    booking_id: int,
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(select(Booking).where(Booking.id == booking_id))
    booking = result.scalar_one_or_none()
    if not booking:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
    return booking


@router.delete("/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
async def cancel_booking(
    booking_id: int,
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(select(Booking).where(Booking.id == booking_id))
    booking = result.scalar_one_or_none()
    if not booking:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")

    violation = validate_cancellation(booking)
    if violation:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=[{"rule": violation.rule, "message": violation.message}],
        )

    # Cancelled bookings are kept; they simply stop occupying their slot
    booking.status = BookingStatus.CANCELLED
    logger.info("Booking %s cancelled", booking.id)
