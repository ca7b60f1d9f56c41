"""rentalstore - Persistent data layer for a bilingual car-rental site."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("rentalstore")
except PackageNotFoundError:
    __version__ = "0+local"
from rentalstore.aggregates import (
    DashboardStats,
    customers_to_notify,
    dashboard_stats,
    is_late,
    late_customers,
    needs_payment_reminder,
    new_bookings,
    remaining_amount,
    total_earnings,
)
from rentalstore.config import StoreConfig
from rentalstore.exceptions import (
    CollectionUnavailableError,
    ReadOnlyCollectionError,
    RentalConfigError,
    RentalStoreError,
    SeedFetchError,
    StorageError,
    StoreInitializationError,
)
from rentalstore.models import (
    Bilingual,
    Booking,
    BookingDraft,
    BookingStatus,
    Branch,
    Car,
    CarCategory,
    CarContent,
    Customer,
    Language,
    Offer,
    SiteConfig,
)
from rentalstore.preferences import Preferences
from rentalstore.seed import DirectorySeedSource, HttpSeedSource, SeedSource
from rentalstore.session import AdminSession
from rentalstore.storage import JsonFileStorage, KeyValueStorage, MemoryStorage
from rentalstore.store import Collection, RentalStore

__all__ = [
    "__version__",
    "AdminSession",
    "Bilingual",
    "Booking",
    "BookingDraft",
    "BookingStatus",
    "Branch",
    "Car",
    "CarCategory",
    "CarContent",
    "Collection",
    "CollectionUnavailableError",
    "Customer",
    "DashboardStats",
    "DirectorySeedSource",
    "HttpSeedSource",
    "JsonFileStorage",
    "KeyValueStorage",
    "Language",
    "MemoryStorage",
    "Offer",
    "Preferences",
    "ReadOnlyCollectionError",
    "RentalConfigError",
    "RentalStore",
    "RentalStoreError",
    "SeedFetchError",
    "SeedSource",
    "SiteConfig",
    "StorageError",
    "StoreConfig",
    "StoreInitializationError",
    "customers_to_notify",
    "dashboard_stats",
    "is_late",
    "late_customers",
    "needs_payment_reminder",
    "new_bookings",
    "remaining_amount",
    "total_earnings",
]
