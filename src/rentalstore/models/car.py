"""Car and car-content models."""

from __future__ import annotations

import enum

from pydantic import Field

from rentalstore.models._base import Bilingual, RentalBaseModel


class CarCategory(enum.StrEnum):
    ECONOMY = "economy"
    SUV = "suv"
    LUXURY = "luxury"


class CarSpecs(RentalBaseModel):
    fuel: Bilingual = Field(default_factory=Bilingual)
    capacity: Bilingual = Field(default_factory=Bilingual)
    transmission: Bilingual = Field(default_factory=Bilingual)


class CarPrice(RentalBaseModel):
    daily: float = Field(default=0, ge=0)
    weekly: float = Field(default=0, ge=0)


class Car(RentalBaseModel):
    """A car of the rental fleet."""

    id: int
    name: Bilingual
    category: CarCategory
    images: list[str] = Field(default_factory=list)
    """Image URLs, first one is the cover image."""
    specs: CarSpecs = Field(default_factory=CarSpecs)
    price: CarPrice = Field(default_factory=CarPrice)


class CarContent(RentalBaseModel):
    """A marketing content block attached to a car."""

    id: int
    car_id: int
    title: Bilingual = Field(default_factory=Bilingual)
    content: Bilingual = Field(default_factory=Bilingual)
    seo_text: Bilingual = Field(default_factory=Bilingual)
    image: str = ""
