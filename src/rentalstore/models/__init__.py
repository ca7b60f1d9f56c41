"""Data models for rental records."""

from rentalstore.models._base import Bilingual, Language, RentalBaseModel
from rentalstore.models.booking import Booking, BookingDraft, BookingStatus
from rentalstore.models.car import Car, CarCategory, CarContent, CarPrice, CarSpecs
from rentalstore.models.customer import Customer
from rentalstore.models.site import Branch, ContactInfo, Coordinates, Offer, SiteConfig, SocialLinks

__all__ = [
    "Bilingual",
    "Booking",
    "BookingDraft",
    "BookingStatus",
    "Branch",
    "Car",
    "CarCategory",
    "CarContent",
    "CarPrice",
    "CarSpecs",
    "ContactInfo",
    "Coordinates",
    "Customer",
    "Language",
    "Offer",
    "RentalBaseModel",
    "SiteConfig",
    "SocialLinks",
]
