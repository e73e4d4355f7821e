"""Request identity models used to detect stale fetch results."""

from dataclasses import dataclass
from datetime import date

from vis_timetables.domain.models.transport_mode import TransportMode


@dataclass(frozen=True)
class LineQuery:
    """Inputs of a line-metadata fetch."""

    line_id: str
    transport_mode: TransportMode
    language: str


@dataclass(frozen=True)
class DeparturesQuery:
    """Inputs of a departures fetch."""

    line_id: str
    transport_mode: TransportMode
    date: date
    direction: int
    language: str
