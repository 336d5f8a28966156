"""Application configuration from environment variables."""

from datetime import datetime

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    app_name: str = "Municipal Reservations"
    debug: bool = True
    api_prefix: str = "/api/v1"
    log_level: str = "INFO"

    # Database
    database_url: str = "postgresql+asyncpg://reservations:reservations@db:5432/reservations"
    database_echo: bool = False

    # Calendar
    timezone: str = "Europe/Madrid"
    # Months on the summer timetable (07:00-24:00); every other month is winter (08:00-22:00)
    summer_months: list[int] = [4, 5, 6, 7, 8, 9]
    # Fixed "now" for demos and acceptance environments. Unset = live wall clock.
    reference_now: datetime | None = None

    # Booking limits
    max_booking_hours: int = 4

    model_config = {"env_prefix": "MR_", "env_file": ".env", "extra": "ignore"}

    @property
    def summer_month_set(self) -> frozenset[int]:
        return frozenset(self.summer_months)


settings = Settings()
