"""Reference data supplied by seed resources: branches, offers, site config."""

from __future__ import annotations

from pydantic import Field

from rentalstore.models._base import Bilingual, RentalBaseModel


class Coordinates(RentalBaseModel):
    lat: float
    lng: float


class Branch(RentalBaseModel):
    id: int
    name: Bilingual
    address: Bilingual = Field(default_factory=Bilingual)
    hours: Bilingual = Field(default_factory=Bilingual)
    phone: str = ""
    coords: Coordinates | None = None


class Offer(RentalBaseModel):
    id: int
    title: Bilingual
    description: Bilingual = Field(default_factory=Bilingual)
    image: str = ""


class ContactInfo(RentalBaseModel):
    address: Bilingual = Field(default_factory=Bilingual)
    email: str = ""
    phone: str = ""


class SocialLinks(RentalBaseModel):
    """Social-media profile URLs; empty string when the site has none."""

    facebook: str = ""
    twitter: str = ""
    instagram: str = ""
    linkedin: str = ""
    tiktok: str = ""


class SiteConfig(RentalBaseModel):
    """Singleton holding the site's contact details and social links."""

    contact: ContactInfo = Field(default_factory=ContactInfo)
    social: SocialLinks = Field(default_factory=SocialLinks)
