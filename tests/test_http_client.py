"""Tests for the transport HTTP client and HTTP repositories."""

import asyncio
from datetime import date
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from vis_timetables.adapters.config import AppConfig
from vis_timetables.adapters.transport_api import (
    HttpBannerRepository,
    HttpDepartureRepository,
    HttpLineRepository,
    TransportApiError,
    TransportHttpClient,
)
from vis_timetables.domain.models import BannerContext, TransportMode


def _session(status: int = 200, payload: Any = None, reason: str = "OK") -> MagicMock:
    response = MagicMock()
    response.status = status
    response.reason = reason
    response.headers = {"Content-Type": "application/json"}
    response.json = AsyncMock(return_value=payload)
    response.text = AsyncMock(return_value="error body")

    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=response)
    context.__aexit__ = AsyncMock(return_value=False)

    session = MagicMock()
    session.get.return_value = context
    return session


@pytest.fixture
def config() -> AppConfig:
    return AppConfig.for_testing(
        api_base_url="https://api.vis.test/",
        device_id="device-1",
        municipality="vis",
    )


@pytest.mark.asyncio
async def test_fetch_line_builds_url_and_headers(config: AppConfig) -> None:
    """Given a session, when fetching a line, then the mode path and client headers are sent."""
    session = _session(payload={"id": "line-602"})
    client = TransportHttpClient(config, session=session)

    data = await client.fetch_line(TransportMode.SEA, "line-602", "en")

    assert data == {"id": "line-602"}
    args, kwargs = session.get.call_args
    assert args[0] == "https://api.vis.test/transport/sea/lines/line-602"
    assert kwargs["headers"]["Accept-Language"] == "en"
    assert kwargs["headers"]["X-Device-ID"] == "device-1"
    assert kwargs["headers"]["X-User-Mode"] == "visitor"
    assert kwargs["headers"]["X-Municipality"] == "vis"


@pytest.mark.asyncio
async def test_fetch_departures_sends_date_and_direction(config: AppConfig) -> None:
    """Given a date and direction, when fetching departures, then they are query parameters."""
    session = _session(payload={"departures": []})
    client = TransportHttpClient(config, session=session)

    await client.fetch_departures(TransportMode.ROAD, "bus-1", date(2026, 7, 15), 1, "hr")

    args, kwargs = session.get.call_args
    assert args[0] == "https://api.vis.test/transport/road/lines/bus-1/departures"
    assert kwargs["params"] == {"date": "2026-07-15", "direction": 1}


@pytest.mark.asyncio
async def test_non_200_raises_with_status(config: AppConfig) -> None:
    """Given a 404 response, when fetching, then TransportApiError carries the status code."""
    client = TransportHttpClient(config, session=_session(status=404, reason="Not Found"))

    with pytest.raises(TransportApiError) as exc_info:
        await client.fetch_line(TransportMode.SEA, "missing", "hr")

    assert exc_info.value.status_code == 404
    assert "(404)" in str(exc_info.value)


@pytest.mark.asyncio
async def test_missing_session_raises(config: AppConfig) -> None:
    """Given no session, when fetching, then TransportApiError is raised."""
    client = TransportHttpClient(config)

    with pytest.raises(TransportApiError, match="No HTTP session"):
        await client.fetch_line(TransportMode.SEA, "line-602", "hr")


@pytest.mark.asyncio
async def test_client_error_is_wrapped(config: AppConfig) -> None:
    """Given a connection failure, when fetching, then it surfaces as TransportApiError."""
    session = MagicMock()
    session.get.side_effect = aiohttp.ClientConnectionError("connection refused")
    client = TransportHttpClient(config, session=session)

    with pytest.raises(TransportApiError, match="connection refused"):
        await client.fetch_line(TransportMode.SEA, "line-602", "hr")


@pytest.mark.asyncio
async def test_timeout_is_wrapped(config: AppConfig) -> None:
    """Given a timeout, when fetching, then it surfaces as TransportApiError."""
    session = _session()
    session.get.return_value.__aenter__.side_effect = asyncio.TimeoutError()
    client = TransportHttpClient(config, session=session)

    with pytest.raises(TransportApiError, match="Timeout"):
        await client.fetch_line(TransportMode.SEA, "line-602", "hr")


@pytest.mark.asyncio
async def test_repositories_parse_responses(config: AppConfig) -> None:
    """Given JSON responses, when using the HTTP repositories, then domain models come back."""
    line_client = TransportHttpClient(
        config,
        session=_session(payload={"id": "line-602", "name": "Vis - Split", "routes": []}),
    )
    departures_client = TransportHttpClient(
        config,
        session=_session(
            payload={"departures": [{"id": "d1", "departure_time": "05:30", "destination": "S"}]}
        ),
    )
    banner_session = _session(payload={"banners": [{"id": "b1", "title": "Bura"}]})
    banner_client = TransportHttpClient(config, session=banner_session)

    line = await HttpLineRepository(line_client).get_line(TransportMode.SEA, "line-602", "hr")
    departures = await HttpDepartureRepository(departures_client).get_departures(
        TransportMode.SEA, "line-602", date(2026, 7, 15), 0, "hr"
    )
    context = BannerContext(device_id="device-2", municipality="komiza")
    banners = await HttpBannerRepository(banner_client).get_active_banners(context, "en")

    assert line.name == "Vis - Split"
    assert [d.id for d in departures] == ["d1"]
    assert [b.title for b in banners] == ["Bura"]
    _, kwargs = banner_session.get.call_args
    assert kwargs["params"] == {"screen": "transport"}
    assert kwargs["headers"]["X-Device-ID"] == "device-2"
    assert kwargs["headers"]["Accept-Language"] == "en"
    assert kwargs["headers"]["X-Municipality"] == "komiza"
