"""All models imported here for Alembic autogenerate discovery."""

from reservations.models.base import Base
from reservations.models.booking import Booking, BookingStatus
from reservations.models.facility_pass import Pass, PassStatus

__all__ = [
    "Base",
    "Booking",
    "BookingStatus",
    "Pass",
    "PassStatus",
]
