"""Facility catalogue.

Facilities are fixed for the municipality, so they live in code rather than
in the database. Bookings store the display name as their facility key.
"""

import enum
from dataclasses import dataclass


class BookingType(str, enum.Enum):
    SPORTS = "sports"
    GYM = "gym"
    POOL = "pool"


class PassType(str, enum.Enum):
    """Period sold by a gym or pool pass."""

    DAILY = "daily"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"


@dataclass(frozen=True)
class Facility:
    key: str
    name: str
    booking_type: BookingType


FACILITIES: tuple[Facility, ...] = (
    Facility("padel", "Padel Court", BookingType.SPORTS),
    Facility("football", "Football Field", BookingType.SPORTS),
    Facility("futsal", "Futsal Court", BookingType.SPORTS),
    Facility("fronton", "Fronton", BookingType.SPORTS),
    Facility("gym", "Gymnasium", BookingType.GYM),
    Facility("pool", "Swimming Pool", BookingType.POOL),
)

_BY_KEY = {f.key: f for f in FACILITIES}
_BY_NAME = {f.name: f for f in FACILITIES}


def get_facility(key_or_name: str) -> Facility | None:
    """Look a facility up by its key ("padel") or display name ("Padel Court")."""
    return _BY_KEY.get(key_or_name) or _BY_NAME.get(key_or_name)


def facility_name(key_or_name: str | None) -> str | None:
    """Normalise a key or name to the display name used on bookings.

    Unknown values pass through unchanged; None stays None (whole venue).
    """
    if key_or_name is None:
        return None
    facility = get_facility(key_or_name)
    return facility.name if facility else key_or_name
