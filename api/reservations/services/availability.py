"""Slot availability: interval overlap and per-slot status for a day's grid.

Pure calculation module. Bookings are any objects exposing facility,
booking_date, start_time, end_time, duration_hours and status (ORM rows in
production, SimpleNamespace in tests). Nothing here reads the clock.

A facility of None means whole-venue mode: every booking of the day is an
obstacle, whatever facility it holds.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Protocol

from reservations.services.operating_hours import (
    SUMMER_MONTHS,
    calendar_day,
    hour_of,
    is_past,
    opening_hours,
)

CANCELLED = "cancelled"


class BookingLike(Protocol):
    facility: str
    booking_date: date
    start_time: str
    end_time: str | None
    duration_hours: int
    status: Any


@dataclass(frozen=True)
class SlotStatus:
    hour: str
    end: str
    available: bool
    past: bool
    reserved: bool
    occupying_facility: str | None = None


def booking_interval(booking: BookingLike) -> tuple[int, int]:
    """Occupied [start, end) hours. end_time wins over start + duration."""
    start = hour_of(booking.start_time)
    if booking.end_time:
        return start, hour_of(booking.end_time)
    return start, start + booking.duration_hours


def overlaps(candidate_start: int, candidate_end: int, booking_start: int, booking_end: int) -> bool:
    """Whether a candidate interval collides with a booked one.

    Back-to-back intervals (candidate_end == booking_start or
    candidate_start == booking_end) do not collide.
    """
    return (
        booking_start <= candidate_start < booking_end
        or booking_start < candidate_end <= booking_end
        or (candidate_start <= booking_start and candidate_end >= booking_end)
    )


def _is_cancelled(booking: BookingLike) -> bool:
    status = getattr(booking.status, "value", booking.status)
    return status == CANCELLED


def _obstacles(
    query_date: date | datetime,
    bookings: Iterable[BookingLike],
    facility: str | None,
    exclude_id: Any = None,
) -> Iterable[BookingLike]:
    day = calendar_day(query_date)
    for booking in bookings:
        if _is_cancelled(booking):
            continue
        if calendar_day(booking.booking_date) != day:
            continue
        if facility is not None and booking.facility != facility:
            continue
        if exclude_id is not None and getattr(booking, "id", None) == exclude_id:
            continue
        yield booking


def find_conflict(
    query_date: date | datetime,
    candidate_start: str,
    candidate_end: str,
    bookings: Iterable[BookingLike],
    facility: str | None = None,
    exclude_id: Any = None,
) -> BookingLike | None:
    """Return the first booking overlapping [candidate_start, candidate_end), or None.

    Cancelled bookings and bookings on other days are ignored. exclude_id
    skips one booking, so an existing reservation can be re-checked against
    everything else.
    """
    start, end = hour_of(candidate_start), hour_of(candidate_end)
    for booking in _obstacles(query_date, bookings, facility, exclude_id):
        booked_start, booked_end = booking_interval(booking)
        if overlaps(start, end, booked_start, booked_end):
            return booking
    return None


def is_available(
    query_date: date | datetime,
    candidate_start: str,
    candidate_end: str,
    bookings: Iterable[BookingLike],
    facility: str | None = None,
    exclude_id: Any = None,
) -> bool:
    return find_conflict(query_date, candidate_start, candidate_end, bookings, facility, exclude_id) is None


def slot_statuses(
    query_date: date | datetime,
    bookings: Iterable[BookingLike],
    reference_now: datetime,
    facility: str | None = None,
    summer_months: frozenset[int] = SUMMER_MONTHS,
) -> list[SlotStatus]:
    """Status of every bookable hour of the day's grid, in order.

    The closing fence only ends the last slot and gets no status of its own.
    occupying_facility is reported in whole-venue mode only, from the first
    conflicting booking in input order.
    """
    bookings = list(bookings)
    grid = opening_hours(query_date, summer_months)

    statuses: list[SlotStatus] = []
    for hour, next_hour in zip(grid, grid[1:]):
        past = is_past(query_date, hour, reference_now)
        conflict = find_conflict(query_date, hour, next_hour, bookings, facility)
        reserved = conflict is not None

        statuses.append(
            SlotStatus(
                hour=hour,
                end=next_hour,
                available=not past and not reserved,
                past=past,
                reserved=reserved,
                occupying_facility=conflict.facility if reserved and facility is None else None,
            )
        )
    return statuses


def max_consecutive_hours(statuses: Sequence[SlotStatus], start: str) -> int:
    """How many available slots run back to back from start (0 if start is not available)."""
    hours = [s.hour for s in statuses]
    if start not in hours:
        return 0

    count = 0
    for status in statuses[hours.index(start):]:
        if not status.available:
            break
        count += 1
    return count
