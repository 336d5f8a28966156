"""Booking lookup: the day's bookings handed to the availability engine."""

from collections.abc import Sequence
from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from reservations.models.booking import Booking, BookingStatus


async def bookings_for_day(
    db: AsyncSession,
    day: date,
    facility: str | None = None,
    include_cancelled: bool = False,
) -> Sequence[Booking]:
    """All bookings on a calendar day, ordered by start, optionally for one facility."""
    query = select(Booking).where(Booking.booking_date == day)
    if facility is not None:
        query = query.where(Booking.facility == facility)
    if not include_cancelled:
        query = query.where(Booking.status != BookingStatus.CANCELLED)

    result = await db.execute(query.order_by(Booking.start_time, Booking.id))
    return result.scalars().all()
