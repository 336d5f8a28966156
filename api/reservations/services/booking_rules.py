"""Booking rules enforcement.

All booking validation logic lives here, separate from the route handlers.
Each rule returns a BookingViolation or None if the rule passes.
validate_booking() runs all rules and collects violations. Rules work on the
day's bookings as already loaded by the caller; nothing here touches the
database or the clock.
"""

from collections.abc import Iterable
from datetime import date, datetime
from typing import Any

from reservations.models.booking import Booking, BookingStatus
from reservations.services.availability import BookingLike, booking_interval, find_conflict
from reservations.services.facilities import BookingType, get_facility
from reservations.services.operating_hours import (
    SUMMER_MONTHS,
    end_label,
    hour_label,
    hour_of,
    is_past,
    opening_hours,
    resolve_season,
)


class BookingViolation(Exception):
    """Raised when a booking rule is violated."""

    def __init__(self, rule: str, message: str):
        self.rule = rule
        self.message = message
        super().__init__(message)


def _fmt_hours(hours: int) -> str:
    """1 -> "1 hour", 3 -> "3 hours"."""
    return f"{hours} hour{'s' if hours != 1 else ''}"


def validate_booking(
    bookings: Iterable[BookingLike],
    facility: str,
    booking_date: date,
    start_time: str,
    duration_hours: int,
    reference_now: datetime,
    max_hours: int = 4,
    summer_months: frozenset[int] = SUMMER_MONTHS,
    exclude_id: Any = None,
) -> list[BookingViolation]:
    """Run all booking rules and return a list of violations (empty = valid)."""
    violations: list[BookingViolation] = []

    # 1. Known facility
    v = check_facility(facility)
    if v:
        violations.append(v)

    # 2. Duration
    v = check_duration(duration_hours, max_hours)
    if v:
        violations.append(v)
        # Without a sane duration there is no interval to check
        return violations

    # 3. Inside the season's opening hours
    v = check_opening_hours(booking_date, start_time, duration_hours, summer_months)
    if v:
        violations.append(v)
        return violations

    # 4. Not in the past
    v = check_not_in_past(booking_date, start_time, reference_now)
    if v:
        violations.append(v)

    # 5. Slot conflict (double booking) on the same facility.
    # Gym and pool sessions are shared, so only sports facilities are exclusive.
    if is_exclusive(facility):
        end_time = end_label(start_time, duration_hours)
        v = check_slot_conflict(bookings, facility, booking_date, start_time, end_time, exclude_id)
        if v:
            violations.append(v)

    return violations


def is_exclusive(facility: str) -> bool:
    """Whether one booking takes the whole facility for its hours."""
    found = get_facility(facility)
    return found is not None and found.booking_type == BookingType.SPORTS


def check_facility(facility: str) -> BookingViolation | None:
    if get_facility(facility) is None:
        return BookingViolation("unknown_facility", f"Unknown facility: {facility}.")
    return None


def check_duration(duration_hours: int, max_hours: int) -> BookingViolation | None:
    """Bookings run for whole hours, from 1 up to max_hours."""
    if duration_hours < 1 or duration_hours > max_hours:
        return BookingViolation(
            "duration",
            f"Duration {_fmt_hours(duration_hours)} not allowed. Book between 1 hour and {_fmt_hours(max_hours)}.",
        )
    return None


def check_opening_hours(
    booking_date: date,
    start_time: str,
    duration_hours: int,
    summer_months: frozenset[int] = SUMMER_MONTHS,
) -> BookingViolation | None:
    """Start must be a bookable hour and the booking must end by closing time."""
    grid = opening_hours(booking_date, summer_months)
    season = resolve_season(booking_date, summer_months)
    opening, closing = grid[0], grid[-1]

    if start_time not in grid[:-1]:
        return BookingViolation(
            "opening_hours",
            f"Start {start_time} is not a bookable hour. {season.value.capitalize()} hours are {opening} to {closing}.",
        )

    if hour_of(start_time) + duration_hours > hour_of(closing):
        return BookingViolation(
            "opening_hours",
            f"A {_fmt_hours(duration_hours)} booking from {start_time} would end after closing time ({closing}).",
        )

    return None


def check_interval(
    booking_date: date,
    start_time: str,
    end_time: str,
    summer_months: frozenset[int] = SUMMER_MONTHS,
) -> BookingViolation | None:
    """An explicit start/end pair must run forwards and stay inside the day's grid."""
    if hour_of(end_time) <= hour_of(start_time):
        return BookingViolation("interval", f"End {end_time} must be after start {start_time}.")
    return check_opening_hours(booking_date, start_time, hour_of(end_time) - hour_of(start_time), summer_months)


def check_not_in_past(booking_date: date, start_time: str, reference_now: datetime) -> BookingViolation | None:
    """Cannot book a slot that has already started."""
    if is_past(booking_date, start_time, reference_now):
        return BookingViolation("past_booking", "Cannot book a slot in the past.")
    return None


def check_slot_conflict(
    bookings: Iterable[BookingLike],
    facility: str,
    booking_date: date,
    start_time: str,
    end_time: str,
    exclude_id: Any = None,
) -> BookingViolation | None:
    """No two active bookings can overlap on the same facility."""
    conflict = find_conflict(booking_date, start_time, end_time, bookings, facility, exclude_id)

    if conflict:
        _, booked_end = booking_interval(conflict)
        return BookingViolation(
            "slot_conflict",
            f"{conflict.facility} already booked from {conflict.start_time} to {hour_label(booked_end)}.",
        )

    return None


def validate_cancellation(booking: Booking) -> BookingViolation | None:
    """Only active bookings can be cancelled."""
    if booking.status == BookingStatus.CANCELLED:
        return BookingViolation("already_cancelled", "Booking is already cancelled.")
    return None
