"""Opening hours and slot grid generation for municipal facilities.

Pure calculation module: no database, no async, no FastAPI dependencies.
The grid for a date depends only on its season, and the season only on the
month. "Now" is always passed in by the caller.
"""

import enum
from datetime import date, datetime

# Months (1-12) served with the summer timetable. The rest are winter.
SUMMER_MONTHS: frozenset[int] = frozenset({4, 5, 6, 7, 8, 9})

WINTER_OPEN_HOUR = 8
WINTER_CLOSE_HOUR = 22
SUMMER_OPEN_HOUR = 7
SUMMER_CLOSE_HOUR = 24  # "24:00" is the end-of-day fence


class Season(str, enum.Enum):
    WINTER = "winter"
    SUMMER = "summer"


def calendar_day(value: date | datetime) -> date:
    """Strip the time of day, if any."""
    if isinstance(value, datetime):
        return value.date()
    return value


def hour_of(label: str) -> int:
    """Hour component of an "HH:MM" label ("24:00" -> 24)."""
    return int(label.split(":")[0])


def hour_label(hour: int) -> str:
    return f"{hour:02d}:00"


def end_label(start: str, hours: int) -> str:
    """End label for a booking of whole hours starting at start (10:00 + 2 -> 12:00)."""
    return hour_label(hour_of(start) + hours)


def resolve_season(query_date: date | datetime, summer_months: frozenset[int] = SUMMER_MONTHS) -> Season:
    if calendar_day(query_date).month in summer_months:
        return Season.SUMMER
    return Season.WINTER


def opening_window(season: Season) -> tuple[int, int]:
    """(open hour, close hour) for a season; both ends are part of the grid."""
    if season == Season.SUMMER:
        return SUMMER_OPEN_HOUR, SUMMER_CLOSE_HOUR
    return WINTER_OPEN_HOUR, WINTER_CLOSE_HOUR


def opening_hours(query_date: date | datetime, summer_months: frozenset[int] = SUMMER_MONTHS) -> list[str]:
    """Return every hour label of the day's grid, closing fence included.

    Winter: 08:00-22:00 (15 labels). Summer: 07:00-24:00 (18 labels).
    The last label closes the day: it is a valid end but never a start.
    """
    open_hour, close_hour = opening_window(resolve_season(query_date, summer_months))
    return [hour_label(h) for h in range(open_hour, close_hour + 1)]


def start_hours(query_date: date | datetime, summer_months: frozenset[int] = SUMMER_MONTHS) -> list[str]:
    """Labels a booking may start at (grid minus the closing fence)."""
    return opening_hours(query_date, summer_months)[:-1]


def end_hours(query_date: date | datetime, summer_months: frozenset[int] = SUMMER_MONTHS) -> list[str]:
    """Labels a booking may end at (grid minus the opening hour)."""
    return opening_hours(query_date, summer_months)[1:]


def is_past(query_date: date | datetime, label: str, reference_now: datetime) -> bool:
    """Whether a slot starting at label on query_date can no longer be booked.

    Earlier days are entirely past and later days never are. On the reference
    day the running hour already counts as past (hour <= now.hour).
    """
    day = calendar_day(query_date)
    today = reference_now.date()

    if day < today:
        return True
    if day > today:
        return False
    return hour_of(label) <= reference_now.hour
