from __future__ import annotations

from pathlib import Path
from typing import Any

import aiohttp
import pytest

from rentalstore.exceptions import SeedFetchError
from rentalstore.seed import DirectorySeedSource, HttpSeedSource


class _FakeResponse:
    def __init__(self, status: int, text: str) -> None:
        self.status = status
        self._text = text

    async def text(self) -> str:
        return self._text

    async def __aenter__(self) -> _FakeResponse:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        return None


class _FakeSession:
    def __init__(self, responses: dict[str, _FakeResponse | Exception]) -> None:
        self.responses = responses
        self.requested: list[str] = []
        self.closed = False

    def get(self, url: str) -> _FakeResponse:
        self.requested.append(url)
        response = self.responses[url]
        if isinstance(response, Exception):
            raise response
        return response

    async def close(self) -> None:
        self.closed = True


@pytest.mark.asyncio
async def test_http_seed_source_fetches_relative_to_base_url() -> None:
    session = _FakeSession({"https://example.com/data/cars.json": _FakeResponse(200, '[{"id": 1}]')})
    source = HttpSeedSource("https://example.com/data/", session=session)  # type: ignore[arg-type]

    assert await source.fetch("cars.json") == [{"id": 1}]
    assert session.requested == ["https://example.com/data/cars.json"]

    await source.close()
    assert session.closed is False


@pytest.mark.asyncio
async def test_http_seed_source_non_200_raises() -> None:
    session = _FakeSession({"https://example.com/site.json": _FakeResponse(404, "not found")})
    source = HttpSeedSource("https://example.com", session=session)  # type: ignore[arg-type]

    with pytest.raises(SeedFetchError) as exc_info:
        await source.fetch("site.json")

    assert exc_info.value.status_code == 404
    assert exc_info.value.resource == "site.json"


@pytest.mark.asyncio
async def test_http_seed_source_invalid_json_raises() -> None:
    session = _FakeSession({"https://example.com/offers.json": _FakeResponse(200, "<html>")})
    source = HttpSeedSource("https://example.com", session=session)  # type: ignore[arg-type]

    with pytest.raises(SeedFetchError):
        await source.fetch("offers.json")


@pytest.mark.asyncio
async def test_http_seed_source_wraps_client_errors() -> None:
    session = _FakeSession({"https://example.com/cars.json": aiohttp.ClientConnectionError("refused")})
    source = HttpSeedSource("https://example.com", session=session)  # type: ignore[arg-type]

    with pytest.raises(SeedFetchError) as exc_info:
        await source.fetch("cars.json")

    assert isinstance(exc_info.value.__cause__, aiohttp.ClientError)


@pytest.mark.asyncio
async def test_directory_seed_source(tmp_path: Path) -> None:
    (tmp_path / "branches.json").write_text('[{"id": 1, "phone": "04"}]', encoding="utf-8")
    (tmp_path / "broken.json").write_text("{", encoding="utf-8")
    source = DirectorySeedSource(tmp_path)

    assert await source.fetch("branches.json") == [{"id": 1, "phone": "04"}]
    with pytest.raises(SeedFetchError):
        await source.fetch("broken.json")
    with pytest.raises(SeedFetchError):
        await source.fetch("missing.json")
