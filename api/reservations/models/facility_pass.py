"""Pass model: period access to the gym or the pool."""

import enum
from datetime import date
from decimal import Decimal

from sqlalchemy import Boolean, Date, Enum, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from reservations.models.base import Base, TimestampMixin
from reservations.services.facilities import PassType


class PassStatus(str, enum.Enum):
    ACTIVE = "active"
    CANCELLED = "cancelled"


class Pass(TimestampMixin, Base):
    __tablename__ = "passes"

    id: Mapped[int] = mapped_column(primary_key=True)

    facility: Mapped[str] = mapped_column(String(100), nullable=False)
    pass_type: Mapped[PassType] = mapped_column(
        Enum(PassType, name="pass_type", values_callable=lambda e: [x.value for x in e]),
        nullable=False,
    )

    # Both days included
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)

    status: Mapped[PassStatus] = mapped_column(
        Enum(PassStatus, name="pass_status", values_callable=lambda e: [x.value for x in e]),
        default=PassStatus.ACTIVE,
        nullable=False,
    )

    # Holder
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(254), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(50))
    national_id: Mapped[str | None] = mapped_column(String(20))

    is_resident: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(8, 2), default=0, nullable=False)

    __table_args__ = (
        Index("ix_passes_facility_status", "facility", "status"),
        Index("ix_passes_email", "email"),
    )

    def __repr__(self) -> str:
        return f"<Pass {self.pass_type.value} {self.start_date}..{self.end_date} facility={self.facility!r}>"
