from __future__ import annotations

import importlib.util
import json
from pathlib import Path
from types import ModuleType

import pytest
from conftest import FIXED_NOW, FakeSeedSource

from rentalstore.config import StoreConfig
from rentalstore.models import Language
from rentalstore.storage import MemoryStorage
from rentalstore.store import Collection, RentalStore

_SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "dump_store.py"


def _load_script() -> ModuleType:
    spec = importlib.util.spec_from_file_location("dump_store", _SCRIPT)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


async def _store_with_customers() -> RentalStore:
    store = RentalStore(MemoryStorage(), FakeSeedSource(), clock=lambda: FIXED_NOW)
    await store.initialize()
    base = {"carId": 1, "rentalDate": "2025-12-01", "returnDate": "2025-12-05"}
    store.create(Collection.CUSTOMERS, {**base, "name": "Omar", "totalAmount": 1000, "paidAmount": 300})
    store.create(Collection.CUSTOMERS, {**base, "name": "Lina", "totalAmount": 400, "paidAmount": 100})
    return store


@pytest.mark.asyncio
async def test_report_uses_configured_reminder_threshold() -> None:
    dump_store = _load_script()
    store = await _store_with_customers()

    default = json.loads(dump_store.build_report(store, StoreConfig(), Language.EN, as_json=True))
    lowered = json.loads(
        dump_store.build_report(store, StoreConfig(reminder_threshold=250), Language.EN, as_json=True)
    )

    names = {c["id"]: c["name"] for c in default["customers"]}
    assert [names[i] for i in default["reminders"]] == ["Omar"]
    assert [names[i] for i in lowered["reminders"]] == ["Omar", "Lina"]


@pytest.mark.asyncio
async def test_text_report_lists_reminders_and_dashboard() -> None:
    dump_store = _load_script()
    store = await _store_with_customers()
    store.add_booking(
        {
            "carId": 1,
            "fullName": "Guest",
            "phoneNumber": "000",
            "pickupLocation": "A",
            "pickupTime": "t",
            "dropoffLocation": "A",
            "dropoffTime": "t",
        }
    )

    text = dump_store.build_report(store, StoreConfig(reminder_threshold=250), Language.EN)

    assert "reminders (remaining > 250)" in text
    assert "Lina: 300" in text
    assert "new_bookings: 1" in text
    assert "late_customers: 2" in text
