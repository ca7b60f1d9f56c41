"""Store configuration for rentalstore."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Any

from rentalstore._constants import DEFAULT_ADMIN_PASSWORD, DEFAULT_ADMIN_USERNAME, REMINDER_THRESHOLD
from rentalstore.exceptions import RentalConfigError
from rentalstore.models._base import Language


def _env_float(env_key: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise RentalConfigError(f"{env_key} must be numeric, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class StoreConfig:
    """Store configuration.

    Parameters
    ----------
    storage_path : Path
        Directory holding one JSON file per durable storage key.
    seed_base_url : str or None
        Base URL the seed JSON documents are fetched from.  Takes
        precedence over ``seed_directory`` when both are set.
    seed_directory : Path or None
        Local directory holding the seed JSON documents.
    default_language : Language
        UI language used until a preference has been stored.
    admin_username : str
        Username accepted by the admin gate.
    admin_password : str
        Password accepted by the admin gate.  This is a UI-routing gate,
        not a security boundary.
    reminder_threshold : float
        Customers whose remaining balance is strictly greater than this
        amount are eligible for a payment reminder.
    seed_timeout : float
        Total timeout in seconds for a single seed fetch over HTTP.
    """

    storage_path: Path = Path(".rentalstore")
    seed_base_url: str | None = None
    seed_directory: Path | None = None
    default_language: Language = Language.AR
    admin_username: str = DEFAULT_ADMIN_USERNAME
    admin_password: str = DEFAULT_ADMIN_PASSWORD
    reminder_threshold: float = REMINDER_THRESHOLD
    seed_timeout: float = 10.0

    def __post_init__(self) -> None:
        try:
            language = Language(self.default_language)
        except ValueError as exc:
            raise RentalConfigError(f"unsupported language: {self.default_language!r}") from exc
        object.__setattr__(self, "default_language", language)
        object.__setattr__(self, "storage_path", Path(self.storage_path))
        if self.seed_directory is not None:
            object.__setattr__(self, "seed_directory", Path(self.seed_directory))
        if self.reminder_threshold < 0:
            raise RentalConfigError("reminder_threshold must be non-negative")
        if self.seed_timeout <= 0:
            raise RentalConfigError("seed_timeout must be positive")

    @classmethod
    def from_env(cls, **overrides: Any) -> StoreConfig:
        """Create configuration from environment variables.

        Reads the optional ``RENTAL_*`` variables.  Explicit keyword
        arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        StoreConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "RENTAL_STORAGE_PATH": "storage_path",
            "RENTAL_SEED_BASE_URL": "seed_base_url",
            "RENTAL_SEED_DIR": "seed_directory",
            "RENTAL_LANGUAGE": "default_language",
            "RENTAL_ADMIN_USERNAME": "admin_username",
            "RENTAL_ADMIN_PASSWORD": "admin_password",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        # Numeric settings, handled separately
        threshold_env = env.get("RENTAL_REMINDER_THRESHOLD")
        if threshold_env is not None and "reminder_threshold" not in overrides:
            config_kwargs["reminder_threshold"] = _env_float("RENTAL_REMINDER_THRESHOLD", threshold_env)

        timeout_env = env.get("RENTAL_SEED_TIMEOUT")
        if timeout_env is not None and "seed_timeout" not in overrides:
            config_kwargs["seed_timeout"] = _env_float("RENTAL_SEED_TIMEOUT", timeout_env)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
