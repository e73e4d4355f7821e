"""Departure domain model."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class StopTime:
    """Arrival of a departure at one stop.

    A missing arrival time means the vehicle does not call at the stop.
    """

    stop_name: str
    arrival_time: str | None  # HH:MM or HH:MM:SS


@dataclass(frozen=True)
class Departure:
    """One scheduled trip of a line route on a given date."""

    id: str
    departure_time: str  # HH:MM or HH:MM:SS
    destination: str
    duration_minutes: int | None = None
    notes: str | None = None
    marker: str | None = None  # Footnote symbol, e.g. "*"
    stop_times: list[StopTime] = field(default_factory=list)
