"""Schedule state dataclass."""

from dataclasses import dataclass, field
from datetime import date

from vis_timetables.domain.models.banner import Banner
from vis_timetables.domain.models.departure import Departure
from vis_timetables.domain.models.error_details import ErrorDetails
from vis_timetables.domain.models.line import Line
from vis_timetables.domain.models.queries import DeparturesQuery
from vis_timetables.domain.models.transport_mode import TransportMode


@dataclass
class ScheduleState:
    """UI-facing state of a line timetable screen."""

    line_id: str
    transport_mode: TransportMode
    language: str
    selected_date: date
    selected_direction: int = 0

    line: Line | None = None
    banners: list[Banner] = field(default_factory=list)
    loading: bool = True  # Initial load, nothing to show yet
    refreshing: bool = False  # Manual refresh, stale data stays visible
    error: ErrorDetails | None = None  # Line-metadata failure, shown with a retry

    # None until the first successful fetch; [] is a valid "no departures" result
    departures: list[Departure] | None = None
    departures_query: DeparturesQuery | None = None  # Inputs the shown departures belong to
    departures_loading: bool = False
    departures_error: ErrorDetails | None = None  # Recorded for diagnostics only
