"""Line, route, stop and contact domain models."""

from dataclasses import dataclass, field

from vis_timetables.domain.models.transport_mode import TransportMode


@dataclass(frozen=True)
class Stop:
    """A stop on a route, in route order."""

    id: str
    name: str
    order: int


@dataclass(frozen=True)
class Route:
    """One directional variant of a line."""

    id: str
    direction: int
    direction_label: str
    origin: str
    destination: str
    stops: list[Stop] = field(default_factory=list)
    typical_duration_minutes: int | None = None
    marker_note: str | None = None  # Explains departure markers, e.g. "* samo radnim danom"


@dataclass(frozen=True)
class Contact:
    """Operator contact for a line. Any field except operator may be missing."""

    operator: str
    phone: str | None = None
    email: str | None = None
    website: str | None = None


@dataclass(frozen=True)
class Line:
    """A named transport service with its routes and contacts."""

    id: str
    name: str
    transport_mode: TransportMode
    line_number: str | None = None
    subtype: str | None = None  # e.g. "Trajekt", "Katamaran", "Autobus"
    routes: list[Route] = field(default_factory=list)
    contacts: list[Contact] = field(default_factory=list)
