from __future__ import annotations

import copy
from datetime import UTC, datetime
from typing import Any

import pytest

from rentalstore.exceptions import SeedFetchError

CAR_SEED: list[dict[str, Any]] = [
    {
        "id": 1,
        "name": {"en": "Toyota Yaris", "ar": "تويوتا يارس"},
        "category": "economy",
        "images": ["/img/yaris-1.jpg", "/img/yaris-2.jpg"],
        "specs": {
            "fuel": {"en": "Petrol", "ar": "بنزين"},
            "capacity": {"en": "5 seats", "ar": "5 مقاعد"},
            "transmission": {"en": "Automatic", "ar": "أوتوماتيك"},
        },
        "price": {"daily": 120, "weekly": 700},
    },
    {
        "id": 2,
        "name": {"en": "Nissan Patrol", "ar": "نيسان باترول"},
        "category": "suv",
        "images": ["/img/patrol.jpg"],
        "specs": {
            "fuel": {"en": "Petrol", "ar": "بنزين"},
            "capacity": {"en": "7 seats", "ar": "7 مقاعد"},
            "transmission": {"en": "Automatic", "ar": "أوتوماتيك"},
        },
        "price": {"daily": 450, "weekly": 2800},
    },
]

BRANCH_SEED: list[dict[str, Any]] = [
    {
        "id": 1,
        "name": {"en": "Dubai Marina", "ar": "دبي مارينا"},
        "address": {"en": "Marina Walk", "ar": "ممشى المارينا"},
        "hours": {"en": "8am - 10pm", "ar": "8 صباحاً - 10 مساءً"},
        "phone": "+971 4 000 0000",
        "coords": {"lat": 25.08, "lng": 55.14},
    }
]

OFFER_SEED: list[dict[str, Any]] = [
    {
        "id": 1,
        "title": {"en": "Weekend deal", "ar": "عرض نهاية الأسبوع"},
        "description": {"en": "20% off", "ar": "خصم 20%"},
        "image": "/img/offer.jpg",
    }
]

SITE_SEED: dict[str, Any] = {
    "contact": {
        "address": {"en": "Dubai, UAE", "ar": "دبي، الإمارات"},
        "email": "info@example.com",
        "phone": "+971 4 000 0000",
    },
    "social": {"facebook": "https://facebook.com/example", "instagram": "https://instagram.com/example"},
}

FIXED_NOW = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
FIXED_NOW_MS = int(FIXED_NOW.timestamp() * 1000)


class FakeSeedSource:
    """In-memory seed source counting fetches per resource."""

    def __init__(self, resources: dict[str, Any] | None = None, failing: set[str] | None = None) -> None:
        if resources is None:
            resources = {
                "cars.json": CAR_SEED,
                "branches.json": BRANCH_SEED,
                "offers.json": OFFER_SEED,
                "site.json": SITE_SEED,
            }
        self.resources = resources
        self.failing = failing or set()
        self.calls: list[str] = []

    async def fetch(self, resource: str) -> Any:
        self.calls.append(resource)
        if resource in self.failing or resource not in self.resources:
            raise SeedFetchError(f"HTTP 404 for {resource}", resource=resource, status_code=404)
        return copy.deepcopy(self.resources[resource])


@pytest.fixture
def seeds() -> FakeSeedSource:
    return FakeSeedSource()
