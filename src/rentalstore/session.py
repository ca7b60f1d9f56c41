"""Admin session gate."""

from __future__ import annotations

import logging
import secrets

from rentalstore._constants import ADMIN_SESSION_KEY
from rentalstore.config import StoreConfig
from rentalstore.storage import KeyValueStorage

_logger = logging.getLogger(__name__)

_FLAG_SET = "true"


class AdminSession:
    """Persisted flag that routes the UI to the admin views.

    The credential check compares against a single configured pair.  It
    gates navigation only and is not an authentication mechanism.
    """

    def __init__(self, storage: KeyValueStorage, config: StoreConfig) -> None:
        self._storage = storage
        self._username = config.admin_username
        self._password = config.admin_password

    @property
    def is_authenticated(self) -> bool:
        return self._storage.get_item(ADMIN_SESSION_KEY) == _FLAG_SET

    def login(self, username: str, password: str) -> bool:
        """Set the session flag when the credentials match."""
        user_ok = secrets.compare_digest(username.encode(), self._username.encode())
        pass_ok = secrets.compare_digest(password.encode(), self._password.encode())
        if not (user_ok and pass_ok):
            _logger.warning("Admin login rejected for %r", username)
            return False
        self._storage.set_item(ADMIN_SESSION_KEY, _FLAG_SET)
        return True

    def logout(self) -> None:
        self._storage.remove_item(ADMIN_SESSION_KEY)
