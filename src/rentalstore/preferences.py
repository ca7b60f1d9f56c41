"""Auxiliary durable keys: UI language and payment-reminder text."""

from __future__ import annotations

import logging

from rentalstore._constants import DEFAULT_NOTIFICATION_MESSAGE, LANGUAGE_KEY, NOTIFICATION_MESSAGE_KEY
from rentalstore.models import Language
from rentalstore.storage import KeyValueStorage

_logger = logging.getLogger(__name__)


class Preferences:
    """Small settings persisted next to the collections.

    Values are stored as plain strings, not JSON, so that they read the
    same as the keys a browser front-end writes.
    """

    def __init__(self, storage: KeyValueStorage, *, default_language: Language = Language.AR) -> None:
        self._storage = storage
        self._default_language = default_language

    @property
    def language(self) -> Language:
        stored = self._storage.get_item(LANGUAGE_KEY)
        if stored is None:
            return self._default_language
        try:
            return Language(stored)
        except ValueError:
            _logger.warning("Ignoring unsupported stored language %r", stored)
            return self._default_language

    @language.setter
    def language(self, value: Language | str) -> None:
        self._storage.set_item(LANGUAGE_KEY, Language(value).value)

    def toggle_language(self) -> Language:
        """Switch between English and Arabic and return the new language."""
        new = Language.AR if self.language == Language.EN else Language.EN
        self.language = new
        return new

    @property
    def notification_message(self) -> str:
        stored = self._storage.get_item(NOTIFICATION_MESSAGE_KEY)
        return stored if stored else DEFAULT_NOTIFICATION_MESSAGE

    @notification_message.setter
    def notification_message(self, value: str) -> None:
        self._storage.set_item(NOTIFICATION_MESSAGE_KEY, value)
