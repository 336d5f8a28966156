"""Gym and pool passes.

A pass gives open access to a shared facility for a period instead of a
single hour. Only the period arithmetic and the pass rules live here; the
routes handle persistence.
"""

from datetime import date

from dateutil.relativedelta import relativedelta

from reservations.services.booking_rules import BookingViolation
from reservations.services.facilities import BookingType, PassType, get_facility


# Calendar months covered by each pass type
PASS_MONTHS = {
    PassType.DAILY: 0,
    PassType.MONTHLY: 1,
    PassType.QUARTERLY: 3,
}


def pass_end_date(start: date, pass_type: PassType) -> date:
    """Last day of a pass bought for start.

    A daily pass ends the day it starts. Monthly and quarterly passes add
    calendar months, clamped to the end of shorter months (Jan 31 + 1 month
    -> Feb 28).
    """
    return start + relativedelta(months=PASS_MONTHS[PassType(pass_type)])


def check_pass_facility(facility: str) -> BookingViolation | None:
    """Passes are sold for the gym and the pool only."""
    found = get_facility(facility)
    if found is None:
        return BookingViolation("unknown_facility", f"Unknown facility: {facility}.")
    if found.booking_type == BookingType.SPORTS:
        return BookingViolation("pass_facility", f"{found.name} is booked by the hour and has no passes.")
    return None
