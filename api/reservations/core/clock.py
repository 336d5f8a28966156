"""Reference "now" for past-slot checks.

The availability engine never reads the clock. Routes take the reference
instant from this dependency, so a fixed demo date is a configuration
choice (MR_REFERENCE_NOW) and tests can override it.
"""

from datetime import datetime
from zoneinfo import ZoneInfo

from reservations.core.config import settings


def local_tz() -> ZoneInfo:
    return ZoneInfo(settings.timezone)


def get_reference_now() -> datetime:
    """Configured fixed instant if set, otherwise wall-clock time in the municipality's timezone."""
    if settings.reference_now is not None:
        return settings.reference_now
    return datetime.now(local_tz())
