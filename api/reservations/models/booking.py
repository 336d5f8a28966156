"""Booking model.

A booking reserves a facility for whole hours on a given day. Start and end
are stored as "HH:MM" labels because the summer grid closes at "24:00",
which has no time-of-day representation.
"""

import enum
from datetime import date
from decimal import Decimal

from sqlalchemy import Boolean, Date, Enum, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from reservations.models.base import Base, TimestampMixin
from reservations.services.facilities import BookingType


class BookingStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class Booking(TimestampMixin, Base):
    __tablename__ = "bookings"

    id: Mapped[int] = mapped_column(primary_key=True)

    # What
    facility: Mapped[str] = mapped_column(String(100), nullable=False)
    booking_type: Mapped[BookingType] = mapped_column(
        Enum(BookingType, name="booking_type", values_callable=lambda e: [x.value for x in e]),
        default=BookingType.SPORTS,
        nullable=False,
    )

    # When
    booking_date: Mapped[date] = mapped_column(Date, nullable=False)
    start_time: Mapped[str] = mapped_column(String(5), nullable=False)
    end_time: Mapped[str | None] = mapped_column(String(5))
    duration_hours: Mapped[int] = mapped_column(default=1, nullable=False)

    status: Mapped[BookingStatus] = mapped_column(
        Enum(BookingStatus, name="booking_status", values_callable=lambda e: [x.value for x in e]),
        default=BookingStatus.CONFIRMED,
        nullable=False,
    )

    # Who
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(254), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(50))
    national_id: Mapped[str | None] = mapped_column(String(20))

    # Pricing inputs, recorded as submitted
    is_resident: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    with_lights: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(8, 2), default=0, nullable=False)

    __table_args__ = (
        # The day grid: all bookings for a date, optionally one facility
        Index("ix_bookings_date_facility", "booking_date", "facility"),
        Index("ix_bookings_email", "email", "booking_date"),
    )

    def __repr__(self) -> str:
        return f"<Booking {self.booking_date} {self.start_time}-{self.end_time} facility={self.facility!r}>"
