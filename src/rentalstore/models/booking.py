"""Booking models."""

from __future__ import annotations

import enum
from datetime import UTC, datetime

from pydantic import Field, field_validator

from rentalstore.models._base import Bilingual, RentalBaseModel


class BookingStatus(enum.StrEnum):
    NEW = "new"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"


class BookingDraft(RentalBaseModel):
    """Fields a customer submits through the public booking form."""

    car_id: int
    full_name: str
    phone_number: str
    email: str | None = None
    id_number: str | None = None
    pickup_location: str
    pickup_time: str
    dropoff_location: str
    dropoff_time: str
    current_location: str = ""
    notes: str | None = None


class Booking(BookingDraft):
    """A stored booking request.

    ``car_name`` is a copy of the car's name taken when the booking was
    made and is not refreshed when the car is edited later.
    """

    id: str
    car_name: Bilingual
    status: BookingStatus = BookingStatus.NEW
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @field_validator("created_at")
    @classmethod
    def _ensure_tz_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value
