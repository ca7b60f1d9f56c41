"""Customer model."""

from __future__ import annotations

from datetime import date

from pydantic import Field

from rentalstore.models._base import RentalBaseModel


class Customer(RentalBaseModel):
    """A rental customer tracked by the back-office."""

    id: int
    name: str
    phone: str = ""
    car_id: int
    rental_date: date
    return_date: date
    total_amount: float = Field(default=0, ge=0)
    paid_amount: float = Field(default=0, ge=0)

    @property
    def remaining_amount(self) -> float:
        """Outstanding balance; negative when overpaid."""
        return self.total_amount - self.paid_amount
