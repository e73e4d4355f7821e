"""Display-ready view of a line timetable."""

from dataclasses import dataclass, field
from datetime import date

from vis_timetables.domain.models.banner import Banner
from vis_timetables.domain.models.carrier_info import CarrierInfo, TicketDisplay
from vis_timetables.domain.models.day_type import DayType
from vis_timetables.domain.models.error_details import ErrorDetails
from vis_timetables.domain.models.line import Contact, Route
from vis_timetables.domain.models.timeline_entry import TimelineEntry
from vis_timetables.domain.models.transport_mode import TransportMode


@dataclass(frozen=True)
class DirectionTab:
    """One direction toggle button."""

    direction: int
    label: str
    is_active: bool


@dataclass(frozen=True)
class DepartureView:
    """A departure row with its expandable timeline."""

    id: str
    departure_time: str  # HH:MM
    destination: str
    marker: str | None
    notes: str | None
    duration_minutes: int | None
    timeline: list[TimelineEntry] = field(default_factory=list)

    @property
    def has_stop_detail(self) -> bool:
        return bool(self.timeline)


@dataclass(frozen=True)
class ScheduleView:
    """Everything a timetable screen renders for one line, date and direction."""

    line_id: str
    transport_mode: TransportMode
    service_date: date
    day_type: DayType
    is_holiday: bool
    holiday_name: str | None = None
    line_name: str | None = None
    line_number: str | None = None
    subtype: str | None = None
    show_direction_toggle: bool = False
    direction_tabs: list[DirectionTab] = field(default_factory=list)
    current_route: Route | None = None
    departures: list[DepartureView] = field(default_factory=list)
    departures_loaded: bool = False  # False: nothing fetched yet, True with no rows: no service
    marker_note: str | None = None
    carrier: CarrierInfo | None = None
    ticket_display: TicketDisplay = TicketDisplay.FALLBACK
    contacts: list[Contact] = field(default_factory=list)
    banners: list[Banner] = field(default_factory=list)
    loading: bool = False
    refreshing: bool = False
    error: ErrorDetails | None = None

    @property
    def has_departures(self) -> bool:
        return bool(self.departures)

    @property
    def line_title(self) -> str:
        """Title like '602: Vis-Split', the line name when no route is selected."""
        if self.current_route is None:
            return self.line_name or self.line_id
        route = f"{self.current_route.origin}-{self.current_route.destination}"
        return f"{self.line_number}: {route}" if self.line_number else route
