"""Domain models for Vis transport timetables."""

from vis_timetables.domain.models.banner import Banner, BannerContext
from vis_timetables.domain.models.carrier_info import CarrierInfo, TicketDisplay
from vis_timetables.domain.models.day_type import DayType
from vis_timetables.domain.models.departure import Departure, StopTime
from vis_timetables.domain.models.error_details import ErrorDetails
from vis_timetables.domain.models.holiday import Holiday
from vis_timetables.domain.models.line import Contact, Line, Route, Stop
from vis_timetables.domain.models.queries import DeparturesQuery, LineQuery
from vis_timetables.domain.models.schedule_state import ScheduleState
from vis_timetables.domain.models.schedule_view import DepartureView, DirectionTab, ScheduleView
from vis_timetables.domain.models.timeline_entry import TimelineEntry
from vis_timetables.domain.models.transport_mode import TransportMode

__all__ = [
    "Banner",
    "BannerContext",
    "CarrierInfo",
    "Contact",
    "DayType",
    "Departure",
    "DepartureView",
    "DeparturesQuery",
    "DirectionTab",
    "ErrorDetails",
    "Holiday",
    "Line",
    "LineQuery",
    "Route",
    "ScheduleState",
    "ScheduleView",
    "Stop",
    "StopTime",
    "TicketDisplay",
    "TimelineEntry",
    "TransportMode",
]
