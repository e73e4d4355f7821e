"""Tests for transport API response parsing."""

from typing import Any

import pytest

from vis_timetables.adapters.transport_api import TransportParser
from vis_timetables.domain.models import TransportMode


@pytest.fixture
def line_payload() -> dict[str, Any]:
    return {
        "id": "line-602",
        "name": "Vis - Split",
        "line_number": "602",
        "subtype": "Trajekt",
        "routes": [
            {
                "id": "602-1",
                "direction": 1,
                "direction_label": "Split - Vis",
                "origin": "Split",
                "destination": "Vis",
                "stops": [
                    {"id": "s-vis", "name": "Vis", "order": 1},
                    {"id": "s-split", "name": "Split", "order": 0},
                ],
                "typical_duration_minutes": 140,
                "marker_note": None,
            },
            {
                "id": "602-0",
                "direction": 0,
                "direction_label": "Vis - Split",
                "origin": "Vis",
                "destination": "Split",
                "stops": [],
                "typical_duration_minutes": None,
                "marker_note": "* ne vozi nedjeljom",
            },
        ],
        "contacts": [
            {"operator": "Jadrolinija", "phone": "021 711 032", "email": None, "website": ""}
        ],
    }


def test_parse_line(line_payload: dict[str, Any]) -> None:
    """Given a line detail response, when parsed, then routes, stops and contacts are mapped."""
    line = TransportParser.parse_line(line_payload, TransportMode.SEA)

    assert line.id == "line-602"
    assert line.line_number == "602"
    assert line.transport_mode == TransportMode.SEA
    route_1 = next(r for r in line.routes if r.direction == 1)
    assert [s.name for s in route_1.stops] == ["Split", "Vis"]
    assert route_1.typical_duration_minutes == 140
    route_0 = next(r for r in line.routes if r.direction == 0)
    assert route_0.marker_note == "* ne vozi nedjeljom"
    assert route_0.typical_duration_minutes is None
    assert line.contacts[0].website is None
    assert line.contacts[0].email is None


def test_parse_line_without_line_number(line_payload: dict[str, Any]) -> None:
    """Given a response without line_number, when parsed, then it stays None."""
    del line_payload["line_number"]

    line = TransportParser.parse_line(line_payload, TransportMode.SEA)

    assert line.line_number is None


def test_parse_line_duplicate_direction_raises(line_payload: dict[str, Any]) -> None:
    """Given two routes with the same direction, when parsed, then a ValueError is raised."""
    line_payload["routes"][1]["direction"] = 1

    with pytest.raises(ValueError, match="more than one route per direction"):
        TransportParser.parse_line(line_payload, TransportMode.SEA)


def test_parse_line_missing_id_raises(line_payload: dict[str, Any]) -> None:
    """Given a line without id, when parsed, then a ValueError is raised."""
    del line_payload["id"]

    with pytest.raises(ValueError, match="Line is missing required field 'id'"):
        TransportParser.parse_line(line_payload, TransportMode.SEA)


def test_parse_departures_from_wrapped_response() -> None:
    """Given a departures response object, when parsed, then the departures list is used."""
    payload = {
        "line_id": "line-602",
        "direction": 0,
        "date": "2026-07-15",
        "departures": [
            {
                "id": "dep-1",
                "departure_time": "05:30:00",
                "destination": "Split",
                "duration_minutes": 140,
                "notes": None,
                "marker": "*",
                "stop_times": [
                    {"stop_name": "Vis", "arrival_time": "05:30:00"},
                    {"stop_name": "Hvar", "arrival_time": None},
                ],
            }
        ],
    }

    departures = TransportParser.parse_departures(payload)

    assert len(departures) == 1
    departure = departures[0]
    assert departure.departure_time == "05:30:00"
    assert departure.marker == "*"
    assert departure.duration_minutes == 140
    assert [st.arrival_time for st in departure.stop_times] == ["05:30:00", None]


def test_parse_departures_from_bare_list() -> None:
    """Given a bare list, when parsed, then each item is a departure; empty stays empty."""
    assert TransportParser.parse_departures([]) == []
    departures = TransportParser.parse_departures(
        [{"id": "d", "departure_time": "12:00", "destination": "Komiža"}]
    )
    assert departures[0].stop_times == []


def test_parse_departures_invalid_time_raises() -> None:
    """Given a malformed departure time, when parsed, then a ValueError is raised."""
    with pytest.raises(ValueError, match="invalid time"):
        TransportParser.parse_departures([{"id": "d", "departure_time": "noon"}])


def test_parse_banners_skips_entries_without_id() -> None:
    """Given banners with and without ids, when parsed, then only identified ones are kept."""
    payload = {
        "banners": [
            {"id": "b1", "title": "Jugo", "body": "Kašnjenja", "is_urgent": True},
            {"title": "No id"},
        ]
    }

    banners = TransportParser.parse_banners(payload)

    assert len(banners) == 1
    assert banners[0].is_urgent is True
    assert banners[0].body == "Kašnjenja"
