"""Seed resources used to populate collections on first run."""

from __future__ import annotations

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Any, Protocol

import aiohttp

from rentalstore.exceptions import SeedFetchError

_logger = logging.getLogger(__name__)


class SeedSource(Protocol):
    """Structural interface for anything able to fetch a seed JSON document.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementations concrete.
    """

    async def fetch(self, resource: str) -> Any:
        ...


class HttpSeedSource:
    """Fetch seed documents over HTTP relative to a base URL.

    Usage::

        async with HttpSeedSource("https://example.com/data") as seeds:
            cars = await seeds.fetch("cars.json")
    """

    def __init__(
        self,
        base_url: str,
        *,
        session: aiohttp.ClientSession | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._external_session = session is not None
        self._http_session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    async def __aenter__(self) -> HttpSeedSource:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    async def close(self) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
        self._http_session = None

    def _session(self) -> aiohttp.ClientSession:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession(timeout=self._timeout)
        return self._http_session

    async def fetch(self, resource: str) -> Any:
        url = f"{self._base_url}/{resource.lstrip('/')}"
        _logger.debug("GET %s", url)

        try:
            async with self._session().get(url) as resp:
                text = await resp.text()
                if resp.status != 200:
                    raise SeedFetchError(
                        f"HTTP {resp.status} from {url}: {text[:200]}",
                        resource=resource,
                        status_code=resp.status,
                    )
        except SeedFetchError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise SeedFetchError(f"Request to {url} failed: {exc}", resource=resource) from exc

        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise SeedFetchError(f"Invalid JSON from {url}: {text[:200]}", resource=resource) from exc


class DirectorySeedSource:
    """Read seed documents from a local directory."""

    def __init__(self, directory: str | os.PathLike[str]) -> None:
        self._directory = Path(directory)

    async def fetch(self, resource: str) -> Any:
        path = self._directory / resource
        _logger.debug("Reading seed %s", path)
        try:
            text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except OSError as exc:
            raise SeedFetchError(f"Failed to read {path}: {exc}", resource=resource) from exc

        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise SeedFetchError(f"Invalid JSON in {path}: {exc}", resource=resource) from exc
