"""Pydantic schemas for API serialisation."""

from datetime import date, datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from reservations.services.facilities import PassType

# --- Facilities ---


class FacilityOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    key: str
    name: str
    booking_type: str


# --- Opening hours ---


class OpeningHoursOut(BaseModel):
    date: date
    season: str
    opening: str  # "HH:MM"
    closing: str  # "HH:MM"
    start_hours: list[str]
    end_hours: list[str]


# --- Availability ---


class SlotOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    hour: str  # "HH:MM"
    end: str  # "HH:MM"
    available: bool
    past: bool
    reserved: bool
    occupying_facility: str | None = None


class AvailabilityOut(BaseModel):
    date: date
    facility: str | None  # None = whole venue
    season: str
    slots: list[SlotOut]


class AvailabilityCheckRequest(BaseModel):
    date: date
    start_time: str = Field(pattern=r"^\d{2}:\d{2}$")
    end_time: str | None = Field(default=None, pattern=r"^\d{2}:\d{2}$")
    duration_hours: int = Field(default=1, ge=1)
    facility: str | None = None
    exclude_booking_id: int | None = None


class AvailabilityCheckOut(BaseModel):
    available: bool
    start_time: str
    end_time: str
    facility: str | None
    conflict: "BookingOut | None" = None


# --- Booking ---


class BookingCreate(BaseModel):
    facility: str
    booking_date: date
    start_time: str = Field(pattern=r"^\d{2}:\d{2}$")
    duration_hours: int = 1
    name: str
    email: EmailStr
    phone: str | None = None
    national_id: str | None = None
    is_resident: bool = False
    with_lights: bool = False
    price: Decimal = Decimal("0")
    status: Literal["pending", "confirmed"] = "confirmed"


class BookingOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    facility: str
    booking_type: str
    booking_date: date
    start_time: str
    end_time: str | None
    duration_hours: int
    status: str
    name: str
    email: str
    price: Decimal
    created_at: datetime


# --- Pass ---


class PassCreate(BaseModel):
    facility: str
    pass_type: PassType
    start_date: date
    name: str
    email: EmailStr
    phone: str | None = None
    national_id: str | None = None
    is_resident: bool = False
    price: Decimal = Decimal("0")


class PassOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    facility: str
    pass_type: str
    start_date: date
    end_date: date
    status: str
    name: str
    email: str
    is_resident: bool
    price: Decimal
    created_at: datetime


AvailabilityCheckOut.model_rebuild()
