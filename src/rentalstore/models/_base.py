"""Base model and shared types for rental records.

Every record model inherits from :class:`RentalBaseModel` which
provides:

* ``alias_generator=to_camel`` so the camelCase keys of the stored
  JSON snapshots map to snake_case fields.
* ``frozen=True``: records are replaced whole, never patched in place.
* :meth:`RentalBaseModel.to_storage` producing the JSON-ready dict that
  is written to durable storage.
"""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Language(enum.StrEnum):
    """The two supported UI locales."""

    EN = "en"
    AR = "ar"


class RentalBaseModel(BaseModel):
    """Base for all persisted rental records."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_storage(self) -> dict[str, Any]:
        """Serialize using the camelCase keys of the storage layout."""
        return self.model_dump(mode="json", by_alias=True)


class Bilingual(RentalBaseModel):
    """The same display value in English and Arabic."""

    en: str = ""
    ar: str = ""

    def get(self, language: Language | str) -> str:
        """Return the value for *language*."""
        return self.ar if Language(language) == Language.AR else self.en
