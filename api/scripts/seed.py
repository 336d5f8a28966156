"""Seed the database with demo bookings.

Run with: python -m scripts.seed
Creates the tables if needed and adds a couple of confirmed bookings and a pool pass so the
availability grid has something to show.
"""

import asyncio
from datetime import date, timedelta
from decimal import Decimal

from sqlalchemy import select

from reservations.core.database import async_session_factory, engine
from reservations.models import Base, Booking, BookingStatus, Pass, PassStatus
from reservations.services.facilities import get_facility
from reservations.services.operating_hours import end_label
from reservations.services.passes import PassType, pass_end_date

DEMO_EMAIL = "demo@example.com"

# (facility key, days from today, start, hours, price)
DEMO_BOOKINGS = [
    ("padel", 1, "10:00", 2, Decimal("8.00")),
    ("gym", 2, "16:00", 2, Decimal("4.00")),
    ("football", 3, "18:00", 1, Decimal("10.00")),
]


async def seed():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_factory() as db:
        result = await db.execute(select(Booking).where(Booking.email == DEMO_EMAIL))
        if result.scalars().first():
            print("Already seeded. Skipping.")
            return

        today = date.today()
        for key, days_ahead, start, hours, price in DEMO_BOOKINGS:
            facility = get_facility(key)
            db.add(
                Booking(
                    facility=facility.name,
                    booking_type=facility.booking_type,
                    booking_date=today + timedelta(days=days_ahead),
                    start_time=start,
                    end_time=end_label(start, hours),
                    duration_hours=hours,
                    status=BookingStatus.CONFIRMED,
                    name="Demo User",
                    email=DEMO_EMAIL,
                    phone="600123456",
                    is_resident=True,
                    with_lights=True,
                    price=price,
                )
            )

        pass_type = PassType.MONTHLY
        db.add(
            Pass(
                facility=get_facility("pool").name,
                pass_type=pass_type,
                start_date=today,
                end_date=pass_end_date(today, pass_type),
                status=PassStatus.ACTIVE,
                name="Demo User",
                email=DEMO_EMAIL,
                is_resident=True,
                price=Decimal("25.00"),
            )
        )

        await db.commit()

        print(f"Seeded {len(DEMO_BOOKINGS)} demo bookings and a pool pass for {DEMO_EMAIL}")


if __name__ == "__main__":
    asyncio.run(seed())
