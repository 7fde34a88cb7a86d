"""End-to-end tests for the export pipeline."""

from __future__ import annotations

import asyncio
import csv
import json
from pathlib import Path

import httpx
import pytest

from bovada_props.api.bovada_client import BovadaClient
from bovada_props.errors import ExportTimeoutError, FetchError, OddsParseError, WriteError
from bovada_props.export.pipeline import ExportPipeline
from conftest import ENDPOINT_GAME, ENDPOINT_SPECIALS, make_event, make_market, make_outcome, make_response


def _handler(bodies: dict[str, object]):
    def handler(request: httpx.Request) -> httpx.Response:
        body = bodies[str(request.url)]
        if isinstance(body, int):
            return httpx.Response(body)
        return httpx.Response(200, json=body)

    return handler


async def _run(settings, handler):
    async with BovadaClient(settings, transport=httpx.MockTransport(handler)) as client:
        return await ExportPipeline(settings, client).run()


def _read(path: str) -> list[list[str]]:
    with open(path, encoding="utf-8", newline="") as fh:
        return list(csv.reader(fh))


@pytest.mark.asyncio
async def test_export_writes_csv(settings, game_response, specials_response):
    result = await _run(
        settings, _handler({ENDPOINT_GAME: game_response, ENDPOINT_SPECIALS: specials_response})
    )

    assert result.output_path == settings.output_path
    assert result.bet_count == 4
    assert result.max_outcomes == 3
    assert result.skipped_placeholders == 1

    rows = _read(settings.output_path)
    assert rows[0] == ["Event", "Bet", "Bet Side", "Bet Side", "Bet Side"]
    assert [r[1] for r in rows[1:]] == [
        "Point Spread $$number=-3.5",
        "Moneyline",
        "Total Points $$number=56.5",
        "Super Bowl MVP",
    ]
    assert rows[1][2] == "Kansas City Chiefs $$line={-3.5} $$odds=1.91 $$points=48"
    assert rows[4][4] == "Travis Kelce $$odds=15 $$points=93"
    assert all(len(r) == 5 for r in rows)


@pytest.mark.asyncio
async def test_export_keeps_placeholders_when_configured(settings, game_response, specials_response):
    settings.skip_placeholder_markets = False
    result = await _run(
        settings, _handler({ENDPOINT_GAME: game_response, ENDPOINT_SPECIALS: specials_response})
    )

    assert result.bet_count == 5
    rows = _read(settings.output_path)
    assert rows[3] == [
        "Kansas City Chiefs @ Tampa Bay Buccaneers",
        "See all player props",
        "",
        "",
        "",
    ]


@pytest.mark.asyncio
async def test_export_without_points(settings, game_response, specials_response):
    settings.include_points = False
    await _run(settings, _handler({ENDPOINT_GAME: game_response, ENDPOINT_SPECIALS: specials_response}))

    rows = _read(settings.output_path)
    assert rows[2][2] == "Kansas City Chiefs $$odds=1.67"
    assert not any("$$points=" in cell for row in rows for cell in row)


@pytest.mark.asyncio
async def test_fetch_failure_writes_nothing(settings, game_response):
    with pytest.raises(FetchError) as exc_info:
        await _run(settings, _handler({ENDPOINT_GAME: game_response, ENDPOINT_SPECIALS: 500}))

    assert exc_info.value.endpoint == ENDPOINT_SPECIALS
    assert not Path(settings.output_path).exists()


@pytest.mark.asyncio
async def test_bad_odds_writes_nothing(settings, game_response):
    broken = make_response(make_event("Specials", [[make_market("MVP", [make_outcome("Someone", "n/a")])]]))

    with pytest.raises(OddsParseError):
        await _run(settings, _handler({ENDPOINT_GAME: game_response, ENDPOINT_SPECIALS: broken}))

    assert not Path(settings.output_path).exists()


@pytest.mark.asyncio
async def test_existing_file_untouched_on_failure(settings, game_response):
    out = Path(settings.output_path)
    out.parent.mkdir(parents=True)
    out.write_text("previous export\n", encoding="utf-8")

    with pytest.raises(FetchError):
        await _run(settings, _handler({ENDPOINT_GAME: game_response, ENDPOINT_SPECIALS: 502}))

    assert out.read_text(encoding="utf-8") == "previous export\n"


@pytest.mark.asyncio
async def test_overall_deadline(settings, game_response):
    settings.overall_timeout_seconds = 0.05

    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(1)
        return httpx.Response(200, json=game_response)

    with pytest.raises(ExportTimeoutError):
        await _run(settings, handler)

    assert not Path(settings.output_path).exists()


@pytest.mark.asyncio
async def test_unencodable_event_name_raises_write_error(settings, specials_response):
    """A lone surrogate escape is valid JSON but cannot be written as UTF-8."""
    broken = make_response(make_event("Game \ud83c", [[make_market("MVP", [make_outcome("Someone", "2.5")])]]))
    raw = json.dumps(broken).encode("ascii")

    def handler(request: httpx.Request) -> httpx.Response:
        if str(request.url) == ENDPOINT_GAME:
            return httpx.Response(200, content=raw, headers={"content-type": "application/json"})
        return httpx.Response(200, json=specials_response)

    with pytest.raises(WriteError):
        await _run(settings, handler)

    assert not Path(settings.output_path).exists()
