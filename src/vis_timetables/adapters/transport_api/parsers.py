"""Parsers for transport API responses."""

import logging
from typing import Any

from vis_timetables.domain.models.banner import Banner
from vis_timetables.domain.models.clock import is_clock_time
from vis_timetables.domain.models.departure import Departure, StopTime
from vis_timetables.domain.models.line import Contact, Line, Route, Stop
from vis_timetables.domain.models.transport_mode import TransportMode

logger = logging.getLogger(__name__)


def _require(data: dict[str, Any], key: str, what: str) -> Any:
    value = data.get(key)
    if value is None or value == "":
        raise ValueError(f"{what} is missing required field '{key}'")
    return value


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None or value == "":
        return None
    return str(value)


def _optional_int(data: dict[str, Any], key: str) -> int | None:
    value = data.get(key)
    if value is None:
        return None
    return int(value)


def _clock(value: Any, what: str) -> str:
    if not isinstance(value, str) or not is_clock_time(value):
        raise ValueError(f"{what} has invalid time {value!r}")
    return value


def _unwrap_list(data: Any, key: str) -> list[dict[str, Any]]:
    """Accept both a bare list and an object wrapping the list under key."""
    if isinstance(data, dict):
        data = data.get(key, [])
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of {key}, got {type(data).__name__}")
    return data


class TransportParser:
    """Parses transport API JSON into domain models."""

    @staticmethod
    def parse_line(data: dict[str, Any], transport_mode: TransportMode) -> Line:
        """Parse a line detail response.

        Args:
            data: Line detail object.
            transport_mode: Mode the line was requested under.

        Returns:
            Line with routes and contacts.

        Raises:
            ValueError: If ids are missing or two routes share a direction.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected line object, got {type(data).__name__}")

        line_id = str(_require(data, "id", "Line"))
        routes = [TransportParser._parse_route(r) for r in data.get("routes") or []]
        directions = [r.direction for r in routes]
        if len(directions) != len(set(directions)):
            raise ValueError(f"Line {line_id} has more than one route per direction: {directions}")

        contacts = [TransportParser._parse_contact(c) for c in data.get("contacts") or []]
        return Line(
            id=line_id,
            name=str(data.get("name") or line_id),
            transport_mode=transport_mode,
            line_number=_optional_str(data, "line_number"),
            subtype=_optional_str(data, "subtype"),
            routes=routes,
            contacts=contacts,
        )

    @staticmethod
    def _parse_route(data: dict[str, Any]) -> Route:
        route_id = str(_require(data, "id", "Route"))
        stops = [
            Stop(
                id=str(_require(s, "id", f"Stop of route {route_id}")),
                name=str(s.get("name", "")),
                order=int(s.get("order", index)),
            )
            for index, s in enumerate(data.get("stops") or [])
        ]
        return Route(
            id=route_id,
            direction=int(_require(data, "direction", f"Route {route_id}")),
            direction_label=str(data.get("direction_label") or ""),
            origin=str(data.get("origin") or ""),
            destination=str(data.get("destination") or ""),
            stops=sorted(stops, key=lambda s: s.order),
            typical_duration_minutes=_optional_int(data, "typical_duration_minutes"),
            marker_note=_optional_str(data, "marker_note"),
        )

    @staticmethod
    def _parse_contact(data: dict[str, Any]) -> Contact:
        return Contact(
            operator=str(data.get("operator") or ""),
            phone=_optional_str(data, "phone"),
            email=_optional_str(data, "email"),
            website=_optional_str(data, "website"),
        )

    @staticmethod
    def parse_departures(data: Any) -> list[Departure]:
        """Parse a departures response, either a list or {"departures": [...]}.

        Raises:
            ValueError: If a departure lacks an id or has an invalid time.
        """
        return [TransportParser._parse_departure(d) for d in _unwrap_list(data, "departures")]

    @staticmethod
    def _parse_departure(data: dict[str, Any]) -> Departure:
        departure_id = str(_require(data, "id", "Departure"))
        what = f"Departure {departure_id}"
        stop_times = [
            StopTime(
                stop_name=str(st.get("stop_name", "")),
                arrival_time=(
                    _clock(st["arrival_time"], what) if st.get("arrival_time") else None
                ),
            )
            for st in data.get("stop_times") or []
        ]
        return Departure(
            id=departure_id,
            departure_time=_clock(data.get("departure_time"), what),
            destination=str(data.get("destination") or ""),
            duration_minutes=_optional_int(data, "duration_minutes"),
            notes=_optional_str(data, "notes"),
            marker=_optional_str(data, "marker"),
            stop_times=stop_times,
        )

    @staticmethod
    def parse_banners(data: Any) -> list[Banner]:
        """Parse an active banners response, either a list or {"banners": [...]}.

        Entries without an id are skipped.
        """
        banners = []
        for item in _unwrap_list(data, "banners"):
            if not item.get("id"):
                logger.warning(f"Skipping banner without id: {item.get('title')!r}")
                continue
            banners.append(
                Banner(
                    id=str(item["id"]),
                    title=str(item.get("title") or ""),
                    body=_optional_str(item, "body"),
                    is_urgent=bool(item.get("is_urgent", False)),
                )
            )
        return banners
