"""Derived figures shown by the admin views.

Everything here is a pure function of the snapshot passed in and is
recomputed on every call.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime, time

from pydantic import BaseModel, ConfigDict

from rentalstore._constants import REMINDER_THRESHOLD
from rentalstore.models import Booking, BookingStatus, Car, Customer


class DashboardStats(BaseModel):
    """Figures on the admin dashboard."""

    model_config = ConfigDict(frozen=True)

    total_cars: int
    total_customers: int
    late_customers: int
    total_earnings: float
    new_bookings: int


def remaining_amount(customer: Customer) -> float:
    """Outstanding balance, not clamped: negative when overpaid."""
    return customer.total_amount - customer.paid_amount


def is_late(customer: Customer, now: datetime | None = None) -> bool:
    """Return date has passed and a balance is still outstanding.

    The return date counts from midnight UTC of that day.
    """
    if now is None:
        now = datetime.now(UTC)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    due = datetime.combine(customer.return_date, time.min, tzinfo=UTC)
    return due < now and remaining_amount(customer) > 0


def needs_payment_reminder(customer: Customer, threshold: float = REMINDER_THRESHOLD) -> bool:
    """Whether the outstanding balance is strictly above *threshold*."""
    return remaining_amount(customer) > threshold


def total_earnings(customers: Iterable[Customer]) -> float:
    return sum(customer.paid_amount for customer in customers)


def late_customers(customers: Iterable[Customer], now: datetime | None = None) -> list[Customer]:
    return [customer for customer in customers if is_late(customer, now)]


def customers_to_notify(customers: Iterable[Customer], threshold: float = REMINDER_THRESHOLD) -> list[Customer]:
    return [customer for customer in customers if needs_payment_reminder(customer, threshold)]


def new_bookings(bookings: Iterable[Booking]) -> list[Booking]:
    """Bookings still in the ``new`` state, most recent first."""
    pending = [booking for booking in bookings if booking.status == BookingStatus.NEW]
    return sorted(pending, key=lambda booking: booking.created_at, reverse=True)


def dashboard_stats(
    cars: Iterable[Car],
    customers: Iterable[Customer],
    bookings: Iterable[Booking],
    now: datetime | None = None,
) -> DashboardStats:
    customer_list = list(customers)
    return DashboardStats(
        total_cars=len(list(cars)),
        total_customers=len(customer_list),
        late_customers=len(late_customers(customer_list, now)),
        total_earnings=total_earnings(customer_list),
        new_bookings=len(new_bookings(bookings)),
    )
