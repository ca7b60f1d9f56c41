"""Custom exception hierarchy for rentalstore."""

from __future__ import annotations

from typing import Any


class RentalStoreError(Exception):
    """Base exception for all rentalstore errors."""


class RentalConfigError(RentalStoreError):
    """Invalid or missing configuration."""


class StorageError(RentalStoreError):
    """Durable key-value storage failed to read or write a key."""

    def __init__(self, message: str, *, key: str = "") -> None:
        self.key = key
        super().__init__(message)


class SeedFetchError(RentalStoreError):
    """A seed resource could not be fetched or is not valid JSON."""

    def __init__(
        self,
        message: str,
        *,
        resource: str = "",
        status_code: int | None = None,
    ) -> None:
        self.resource = resource
        self.status_code = status_code
        super().__init__(message)


class StoreInitializationError(RentalStoreError):
    """One or more collections failed to load during ``initialize()``.

    Raised only after every collection has settled.  Collections that
    loaded successfully are adopted and remain readable; the ones listed
    in ``failures`` stay unavailable until the store is initialized again.
    """

    def __init__(self, message: str, *, failures: dict[Any, BaseException]) -> None:
        self.failures = failures
        super().__init__(message)


class CollectionUnavailableError(RentalStoreError):
    """The collection has not been loaded (or its seed fetch failed)."""


class ReadOnlyCollectionError(RentalStoreError):
    """CRUD attempted on a collection that has no record sequence."""
