#!/usr/bin/env python3
"""Dump every collection held by a rental store.

This script initializes the store from the environment (seeding any
collection that has no stored copy yet) and prints each collection
followed by the customers due a payment reminder (RENTAL_REMINDER_THRESHOLD)
and the admin dashboard figures.

Usage
-----
Set environment variables and run::

    export RENTAL_STORAGE_PATH="./data"
    export RENTAL_SEED_DIR="./public"
    python scripts/dump_store.py

Options::

    --json               Output as machine-readable JSON
    --output FILE        Write output to FILE instead of stdout
    --language en|ar     Language used for car names (default: stored preference)
    -v, --verbose        Enable debug logging
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from rentalstore import (  # noqa: E402
    Collection,
    Customer,
    JsonFileStorage,
    Language,
    Preferences,
    RentalStore,
    StoreConfig,
    StoreInitializationError,
    customers_to_notify,
    dashboard_stats,
)

# ── helpers ──────────────────────────────────────────────────


def _section(title: str) -> str:
    line = "=" * 60
    return f"\n{line}\n  {title}\n{line}"


def _collection_payload(store: RentalStore, collection: Collection) -> Any:
    if not store.is_loaded(collection):
        return None
    value = store.read(collection)
    if collection is Collection.SITE_CONFIG:
        return value.to_storage()
    return [record.to_storage() for record in value]


def _summarize(store: RentalStore, collection: Collection, language: Language) -> list[str]:
    if not store.is_loaded(collection):
        return ["  <unavailable>"]
    if collection is Collection.SITE_CONFIG:
        rendered = json.dumps(store.site_config.to_storage(), ensure_ascii=False, indent=2)
        return [f"  {line}" for line in rendered.splitlines()]

    records = store.read(collection)
    if not records:
        return ["  (empty)"]
    lines = []
    for record in records:
        if collection is Collection.CUSTOMERS:
            car = store.car_name(record.car_id, language)
            lines.append(f"  [{record.id}] {record.name} / {car}: remaining {record.remaining_amount:g}")
        elif collection is Collection.BOOKINGS:
            lines.append(f"  [{record.id}] {record.full_name} / {record.car_name.get(language)} ({record.status.value})")
        elif collection is Collection.CAR_CONTENT:
            lines.append(f"  [{record.id}] {store.car_name(record.car_id, language)}: {record.title.get(language)}")
        else:
            name = getattr(record, "name", None) or getattr(record, "title", None)
            lines.append(f"  [{record.id}] {name.get(language) if name is not None else ''}")
    return lines


def _reminders(store: RentalStore, config: StoreConfig) -> list[Customer] | None:
    if not store.is_loaded(Collection.CUSTOMERS):
        return None
    return customers_to_notify(store.customers, config.reminder_threshold)


def build_report(store: RentalStore, config: StoreConfig, language: Language, *, as_json: bool = False) -> str:
    """Render every collection, the customers due a reminder, and the dashboard."""
    stats = None
    if all(store.is_loaded(c) for c in (Collection.CARS, Collection.CUSTOMERS, Collection.BOOKINGS)):
        stats = dashboard_stats(store.cars, store.customers, store.bookings)
    reminders = _reminders(store, config)

    if as_json:
        payload: dict[str, Any] = {c.value: _collection_payload(store, c) for c in Collection}
        payload["reminders"] = [c.id for c in reminders] if reminders is not None else None
        payload["dashboard"] = stats.model_dump() if stats is not None else None
        return json.dumps(payload, ensure_ascii=False, indent=2)

    lines: list[str] = []
    for collection in Collection:
        lines.append(_section(collection.value))
        lines.extend(_summarize(store, collection, language))

    lines.append(_section(f"reminders (remaining > {config.reminder_threshold:g})"))
    if reminders is None:
        lines.append("  <unavailable>")
    elif not reminders:
        lines.append("  (none)")
    else:
        lines.extend(f"  [{c.id}] {c.name}: {c.remaining_amount:g}" for c in reminders)

    lines.append(_section("dashboard"))
    if stats is None:
        lines.append("  <unavailable>")
    else:
        lines.extend(f"  {key}: {value}" for key, value in stats.model_dump().items())
    return "\n".join(lines)


# ── main ─────────────────────────────────────────────────────


async def _run(args: argparse.Namespace) -> int:
    config = StoreConfig.from_env()
    preferences = Preferences(JsonFileStorage(config.storage_path), default_language=config.default_language)
    language = Language(args.language) if args.language else preferences.language

    exit_code = 0
    async with RentalStore.from_config(config) as store:
        try:
            await store.initialize()
        except StoreInitializationError as exc:
            print(f"warning: {exc}", file=sys.stderr)
            exit_code = 1
        text = build_report(store, config, language, as_json=args.json)

    if args.output:
        Path(args.output).write_text(text + "\n", encoding="utf-8")
    else:
        print(text)
    return exit_code


def main() -> None:
    parser = argparse.ArgumentParser(description="Dump all rental store collections")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument("--output", help="Write output to FILE")
    parser.add_argument("--language", choices=[lang.value for lang in Language], help="Display language")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(asyncio.run(_run(args)))


if __name__ == "__main__":
    main()
