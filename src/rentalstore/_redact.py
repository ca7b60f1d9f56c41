"""Masking of customer contact details in debug logs."""

from __future__ import annotations

from typing import Any

# Storage-layout keys (camelCase) holding personal contact data.
_CONTACT_KEYS: frozenset[str] = frozenset({"phone", "phoneNumber", "email", "idNumber"})


def redact_for_log(record: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of a stored record with contact fields masked.

    Nested records (lists and dicts) are masked as well; empty values
    are left as they are so optional fields stay recognizable.
    """
    return {key: _mask(key, value) for key, value in record.items()}


def _mask(key: str, value: Any) -> Any:
    if key in _CONTACT_KEYS and value:
        return "<redacted>"
    if isinstance(value, dict):
        return redact_for_log(value)
    if isinstance(value, list):
        return [redact_for_log(item) if isinstance(item, dict) else item for item in value]
    return value
