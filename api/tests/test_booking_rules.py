"""Unit tests: booking rules (pure functions, no DB)."""

from datetime import date, datetime
from types import SimpleNamespace

from reservations.models.booking import BookingStatus
from reservations.services.booking_rules import (
    check_duration,
    check_facility,
    check_interval,
    check_not_in_past,
    check_opening_hours,
    check_slot_conflict,
    is_exclusive,
    validate_booking,
    validate_cancellation,
)

DAY = date(2025, 3, 18)  # winter Tuesday
NOW = datetime(2025, 3, 17, 12, 0)


def _booking(facility="Padel Court", start="10:00", end="12:00", hours=2, status="confirmed", id=1):
    return SimpleNamespace(
        id=id,
        facility=facility,
        booking_date=DAY,
        start_time=start,
        end_time=end,
        duration_hours=hours,
        status=status,
    )


def _rules(violations):
    return [v.rule for v in violations]


class TestValidateBooking:
    def test_valid_booking(self):
        assert validate_booking([], "Padel Court", DAY, "10:00", 2, NOW) == []

    def test_conflict(self):
        violations = validate_booking([_booking()], "Padel Court", DAY, "11:00", 1, NOW)
        assert _rules(violations) == ["slot_conflict"]
        assert violations[0].message == "Padel Court already booked from 10:00 to 12:00."

    def test_back_to_back_is_valid(self):
        assert validate_booking([_booking()], "Padel Court", DAY, "12:00", 1, NOW) == []

    def test_other_facility_is_valid(self):
        assert validate_booking([_booking()], "Football Field", DAY, "10:00", 1, NOW) == []

    def test_cancelled_booking_does_not_conflict(self):
        assert validate_booking([_booking(status="cancelled")], "Padel Court", DAY, "10:00", 2, NOW) == []

    def test_editing_ignores_own_booking(self):
        assert validate_booking([_booking(id=5)], "Padel Court", DAY, "11:00", 1, NOW, exclude_id=5) == []

    def test_gym_and_pool_sessions_never_conflict(self):
        gym = _booking(facility="Gymnasium", start="10:00", end="11:00", hours=1)
        pool = _booking(facility="Swimming Pool", start="10:00", end="11:00", hours=1)
        assert validate_booking([gym], "Gymnasium", DAY, "10:00", 1, NOW) == []
        assert validate_booking([pool], "pool", DAY, "10:00", 1, NOW) == []

    def test_past_and_conflict_collected(self):
        now = datetime(2025, 3, 18, 11, 0)
        violations = validate_booking([_booking()], "Padel Court", DAY, "10:00", 1, now)
        assert _rules(violations) == ["past_booking", "slot_conflict"]

    def test_bad_duration_stops_early(self):
        violations = validate_booking([_booking()], "Padel Court", DAY, "10:00", 0, NOW)
        assert _rules(violations) == ["duration"]

    def test_unknown_facility_reported(self):
        assert "unknown_facility" in _rules(validate_booking([], "Tennis", DAY, "10:00", 1, NOW))

    def test_outside_opening_hours_stops_early(self):
        violations = validate_booking([], "Padel Court", DAY, "07:00", 1, NOW)
        assert _rules(violations) == ["opening_hours"]


class TestCheckDuration:
    def test_within_limit(self):
        assert check_duration(1, 4) is None
        assert check_duration(4, 4) is None

    def test_too_long(self):
        v = check_duration(5, 4)
        assert v.rule == "duration"
        assert "5 hours" in v.message

    def test_zero(self):
        assert check_duration(0, 4).rule == "duration"


class TestCheckOpeningHours:
    def test_winter_start_before_opening(self):
        v = check_opening_hours(DAY, "07:00", 1)
        assert v.rule == "opening_hours"
        assert "08:00 to 22:00" in v.message

    def test_closing_fence_is_not_a_start(self):
        assert check_opening_hours(DAY, "22:00", 1).rule == "opening_hours"

    def test_last_slot_is_bookable(self):
        assert check_opening_hours(DAY, "21:00", 1) is None

    def test_runs_past_closing(self):
        v = check_opening_hours(DAY, "21:00", 2)
        assert "after closing time (22:00)" in v.message

    def test_summer_until_midnight(self):
        july = date(2025, 7, 15)
        assert check_opening_hours(july, "07:00", 1) is None
        assert check_opening_hours(july, "22:00", 2) is None
        assert check_opening_hours(july, "23:00", 2) is not None


class TestCheckInterval:
    def test_forward_interval_inside_grid(self):
        assert check_interval(DAY, "10:00", "12:00") is None
        assert check_interval(DAY, "20:00", "22:00") is None

    def test_end_not_after_start(self):
        assert check_interval(DAY, "12:00", "10:00").rule == "interval"
        assert check_interval(DAY, "12:00", "12:00").rule == "interval"

    def test_beyond_closing(self):
        v = check_interval(DAY, "21:00", "51:00")
        assert v.rule == "opening_hours"
        assert "after closing time (22:00)" in v.message

    def test_start_before_opening(self):
        assert check_interval(DAY, "06:00", "09:00").rule == "opening_hours"


class TestSimpleRules:
    def test_exclusive_facilities(self):
        assert is_exclusive("padel") is True
        assert is_exclusive("Fronton") is True
        assert is_exclusive("gym") is False
        assert is_exclusive("Swimming Pool") is False
        assert is_exclusive("Squash") is False

    def test_facility_by_key_or_name(self):
        assert check_facility("padel") is None
        assert check_facility("Padel Court") is None
        assert check_facility("Squash").rule == "unknown_facility"

    def test_not_in_past(self):
        assert check_not_in_past(DAY, "08:00", NOW) is None
        assert check_not_in_past(date(2025, 3, 16), "20:00", NOW).rule == "past_booking"

    def test_slot_conflict_with_derived_end(self):
        existing = _booking(start="16:00", end=None, hours=2)
        v = check_slot_conflict([existing], "Padel Court", DAY, "17:00", "18:00")
        assert v.message == "Padel Court already booked from 16:00 to 18:00."

    def test_cancellation(self):
        assert validate_cancellation(SimpleNamespace(status=BookingStatus.CONFIRMED)) is None
        assert validate_cancellation(SimpleNamespace(status=BookingStatus.CANCELLED)).rule == "already_cancelled"
