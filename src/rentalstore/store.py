"""Local persistent store for the rental collections.

This is the single source of truth for cars, branches, offers, site
configuration, bookings, customers and car content.  Every collection
is loaded once by :meth:`RentalStore.initialize`, kept in memory, and
written back to durable storage in full after each mutation.
"""

from __future__ import annotations

import asyncio
import enum
import json
import logging
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from rentalstore._constants import EMPTY_SEED, MISSING_REFERENCE_LABEL, UNKNOWN_CAR_NAME
from rentalstore._redact import redact_for_log
from rentalstore.config import StoreConfig
from rentalstore.exceptions import (
    CollectionUnavailableError,
    ReadOnlyCollectionError,
    RentalConfigError,
    SeedFetchError,
    StorageError,
    StoreInitializationError,
)
from rentalstore.models import (
    Booking,
    BookingDraft,
    BookingStatus,
    Branch,
    Car,
    CarContent,
    Customer,
    Language,
    Offer,
    RentalBaseModel,
    SiteConfig,
)
from rentalstore.seed import DirectorySeedSource, HttpSeedSource, SeedSource
from rentalstore.storage import JsonFileStorage, KeyValueStorage

_logger = logging.getLogger(__name__)


class Collection(enum.StrEnum):
    """Named collections; the value is the durable storage key."""

    CARS = "cars"
    BRANCHES = "branches"
    OFFERS = "offers"
    SITE_CONFIG = "siteConfig"
    BOOKINGS = "bookings"
    CUSTOMERS = "customers"
    CAR_CONTENT = "carContent"


_RECORD_MODELS: dict[Collection, type[RentalBaseModel]] = {
    Collection.CARS: Car,
    Collection.BRANCHES: Branch,
    Collection.OFFERS: Offer,
    Collection.BOOKINGS: Booking,
    Collection.CUSTOMERS: Customer,
    Collection.CAR_CONTENT: CarContent,
}

SEED_RESOURCES: dict[Collection, str] = {
    Collection.CARS: "cars.json",
    Collection.BRANCHES: "branches.json",
    Collection.OFFERS: "offers.json",
    Collection.SITE_CONFIG: "site.json",
    Collection.BOOKINGS: EMPTY_SEED,
    Collection.CUSTOMERS: EMPTY_SEED,
    Collection.CAR_CONTENT: EMPTY_SEED,
}

_BOOKING_ID_PREFIX = "booking-"


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _as_payload(record: Mapping[str, Any] | BaseModel) -> dict[str, Any]:
    if isinstance(record, BaseModel):
        return record.model_dump()
    return dict(record)


class RentalStore:
    """In-memory collections backed by durable key-value storage.

    Usage::

        store = RentalStore(JsonFileStorage("data"), DirectorySeedSource("seed"))
        await store.initialize()
        car = store.create(Collection.CARS, {...})

    Reads never perform I/O.  Mutations persist the whole collection
    before the in-memory snapshot is swapped, so a failed write leaves
    the store unchanged.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        seeds: SeedSource,
        *,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._storage = storage
        self._seeds = seeds
        self._clock = clock
        self._owned_seeds: HttpSeedSource | None = None
        self._data: dict[Collection, Any] = {}
        self._last_id = 0

    @classmethod
    def from_config(cls, config: StoreConfig) -> RentalStore:
        """Build a store on file storage with the configured seed location."""
        storage = JsonFileStorage(config.storage_path)
        if config.seed_base_url:
            http_seeds = HttpSeedSource(config.seed_base_url, timeout=config.seed_timeout)
            store = cls(storage, http_seeds)
            store._owned_seeds = http_seeds
            return store
        if config.seed_directory is not None:
            return cls(storage, DirectorySeedSource(config.seed_directory))
        raise RentalConfigError("either seed_base_url or seed_directory must be configured")

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> RentalStore:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owned_seeds is not None:
            await self._owned_seeds.close()
            self._owned_seeds = None

    # ------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------

    async def initialize(self) -> None:
        """Load every collection from storage, seeding the missing ones.

        All collections settle before any result is adopted.  Raises
        :class:`StoreInitializationError` when one or more seed fetches
        failed; the other collections are still adopted and readable.
        """
        collections = list(Collection)
        results = await asyncio.gather(
            *(self._load(collection) for collection in collections),
            return_exceptions=True,
        )

        loaded: dict[Collection, Any] = {}
        failures: dict[Collection, BaseException] = {}
        for collection, result in zip(collections, results, strict=True):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                failures[collection] = result
            else:
                loaded[collection] = result

        self._data = loaded

        if failures:
            for collection, exc in failures.items():
                _logger.error("Failed to load collection %s: %s", collection.value, exc)
            names = ", ".join(collection.value for collection in failures)
            raise StoreInitializationError(f"Failed to load collections: {names}", failures=failures)

    async def _load(self, collection: Collection) -> Any:
        key = collection.value
        try:
            stored = await asyncio.to_thread(self._storage.get_item, key)
        except StorageError as exc:
            _logger.warning("Could not read stored %s, reseeding: %s", key, exc)
            stored = None

        if stored is not None:
            try:
                data = json.loads(stored)
            except json.JSONDecodeError as exc:
                _logger.warning("Discarding unparseable stored data for %s: %s", key, exc)
                await asyncio.to_thread(self._storage.remove_item, key)
            else:
                return self._parse_stored(collection, data)

        data = await self._fetch_seed(collection)
        try:
            value = self._parse(collection, data)
        except ValidationError as exc:
            raise SeedFetchError(
                f"Seed data for {key} is invalid: {exc}",
                resource=SEED_RESOURCES[collection],
            ) from exc
        await asyncio.to_thread(self._storage.set_item, key, self._dump(collection, value))
        return value

    @staticmethod
    def _parse_stored(collection: Collection, data: Any) -> Any:
        """Validate a stored snapshot, skipping records that no longer validate.

        The stored key is never rewritten here.  A snapshot whose overall
        shape is wrong fails the collection instead of being replaced.
        """
        key = collection.value
        if collection is Collection.SITE_CONFIG:
            try:
                return SiteConfig.model_validate(data)
            except ValidationError as exc:
                raise StorageError(f"Stored {key} does not validate: {exc}", key=key) from exc

        if not isinstance(data, list):
            raise StorageError(f"Stored {key} is not a list", key=key)

        model = _RECORD_MODELS[collection]
        records = []
        for index, item in enumerate(data):
            try:
                records.append(model.model_validate(item))
            except ValidationError as exc:
                _logger.warning(
                    "Skipping invalid stored %s record at index %d (%d errors)",
                    key,
                    index,
                    exc.error_count(),
                )
        return records

    async def _fetch_seed(self, collection: Collection) -> Any:
        resource = SEED_RESOURCES[collection]
        if resource == EMPTY_SEED:
            return []
        _logger.debug("Seeding %s from %s", collection.value, resource)
        return await self._seeds.fetch(resource)

    @staticmethod
    def _parse(collection: Collection, data: Any) -> Any:
        if collection is Collection.SITE_CONFIG:
            return SiteConfig.model_validate(data)
        adapter = TypeAdapter(list[_RECORD_MODELS[collection]])  # type: ignore[valid-type]
        return adapter.validate_python(data)

    @staticmethod
    def _dump(collection: Collection, value: Any) -> str:
        if collection is Collection.SITE_CONFIG:
            payload: Any = value.to_storage()
        else:
            payload = [record.to_storage() for record in value]
        return json.dumps(payload, ensure_ascii=False)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def is_loaded(self, collection: Collection | str) -> bool:
        return Collection(collection) in self._data

    def read(self, collection: Collection | str) -> Any:
        """Return the current snapshot of *collection*.

        Record collections are returned as a new list in insertion order;
        ``siteConfig`` is returned as a :class:`SiteConfig`.
        """
        collection = Collection(collection)
        try:
            value = self._data[collection]
        except KeyError:
            raise CollectionUnavailableError(f"Collection {collection.value} is not loaded") from None
        if collection is Collection.SITE_CONFIG:
            return value
        return list(value)

    @property
    def cars(self) -> list[Car]:
        return self.read(Collection.CARS)

    @property
    def branches(self) -> list[Branch]:
        return self.read(Collection.BRANCHES)

    @property
    def offers(self) -> list[Offer]:
        return self.read(Collection.OFFERS)

    @property
    def site_config(self) -> SiteConfig:
        return self.read(Collection.SITE_CONFIG)

    @property
    def bookings(self) -> list[Booking]:
        return self.read(Collection.BOOKINGS)

    @property
    def customers(self) -> list[Customer]:
        return self.read(Collection.CUSTOMERS)

    @property
    def car_content(self) -> list[CarContent]:
        return self.read(Collection.CAR_CONTENT)

    def get_car(self, car_id: int | str) -> Car | None:
        """Return the car with *car_id*, or ``None`` when it does not exist."""
        for car in self._data.get(Collection.CARS, []):
            if str(car.id) == str(car_id):
                return car
        return None

    def car_name(self, car_id: int | str, language: Language | str) -> str:
        """Display name of a referenced car, ``"N/A"`` for dangling references."""
        car = self.get_car(car_id)
        if car is None:
            return MISSING_REFERENCE_LABEL
        return car.name.get(language) or MISSING_REFERENCE_LABEL

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def _records(self, collection: Collection) -> list[Any]:
        if collection is Collection.SITE_CONFIG:
            raise ReadOnlyCollectionError("siteConfig is a singleton and has no records")
        return self.read(collection)

    def _next_id(self, collection: Collection, records: list[Any]) -> int:
        """Millisecond timestamp, bumped past the last issued and existing ids."""
        in_use = {str(record.id) for record in records}
        prefix = _BOOKING_ID_PREFIX if collection is Collection.BOOKINGS else ""
        candidate = max(int(self._clock().timestamp() * 1000), self._last_id + 1)
        while f"{prefix}{candidate}" in in_use:
            candidate += 1
        self._last_id = candidate
        return candidate

    def _commit(self, collection: Collection, records: list[Any]) -> None:
        self._storage.set_item(collection.value, self._dump(collection, records))
        self._data[collection] = records

    def create(self, collection: Collection | str, record: Mapping[str, Any] | BaseModel) -> Any:
        """Append a new record with a freshly generated id and persist.

        Any ``id`` in *record* is ignored.  Creating a booking goes
        through :meth:`add_booking`.
        """
        collection = Collection(collection)
        if collection is Collection.BOOKINGS:
            return self.add_booking(record)

        records = self._records(collection)
        payload = _as_payload(record)
        payload.pop("id", None)
        payload["id"] = self._next_id(collection, records)
        created = _RECORD_MODELS[collection].model_validate(payload)

        self._commit(collection, [*records, created])
        _logger.debug("Created %s record: %s", collection.value, redact_for_log(created.to_storage()))
        return created

    def update(self, collection: Collection | str, record: Mapping[str, Any] | BaseModel) -> Any | None:
        """Replace the record with the same id, keeping its position.

        Returns the stored record, or ``None`` when no record has that id
        (the collection is left untouched).
        """
        collection = Collection(collection)
        records = self._records(collection)
        replacement = _RECORD_MODELS[collection].model_validate(_as_payload(record))

        for index, existing in enumerate(records):
            if existing.id == replacement.id:
                break
        else:
            _logger.debug("Update of %s skipped: no record with id %s", collection.value, replacement.id)
            return None

        updated = list(records)
        updated[index] = replacement
        self._commit(collection, updated)
        _logger.debug("Updated %s record: %s", collection.value, redact_for_log(replacement.to_storage()))
        return replacement

    def delete(self, collection: Collection | str, record_id: int | str) -> bool:
        """Remove the record with *record_id*.  Dependent records are kept."""
        collection = Collection(collection)
        records = self._records(collection)
        remaining = [record for record in records if str(record.id) != str(record_id)]
        if len(remaining) == len(records):
            _logger.debug("Delete of %s skipped: no record with id %s", collection.value, record_id)
            return False

        self._commit(collection, remaining)
        _logger.debug("Deleted %s record %s", collection.value, record_id)
        return True

    def add_booking(self, draft: Mapping[str, Any] | BaseModel) -> Booking:
        """Store a booking request submitted through the public form.

        The car's current name is copied into the booking; a booking for
        an unknown car gets the fixed "Unknown" name.
        """
        records = self._records(Collection.BOOKINGS)
        fields = BookingDraft.model_validate(_as_payload(draft))
        car = self.get_car(fields.car_id)

        booking = Booking(
            **fields.model_dump(),
            id=f"{_BOOKING_ID_PREFIX}{self._next_id(Collection.BOOKINGS, records)}",
            car_name=car.name if car is not None else UNKNOWN_CAR_NAME,
            status=BookingStatus.NEW,
            created_at=self._clock(),
        )

        self._commit(Collection.BOOKINGS, [*records, booking])
        _logger.debug("Created booking: %s", redact_for_log(booking.to_storage()))
        return booking
