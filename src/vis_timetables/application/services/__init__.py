"""Application services for timetable resolution."""

from vis_timetables.application.services.carrier_resolver import (
    CARRIER_RULES,
    CarrierResolver,
    CarrierRule,
    normalize_url,
)
from vis_timetables.application.services.day_type_resolver import DayTypeResolver
from vis_timetables.application.services.direction_selector import DirectionSelector
from vis_timetables.application.services.schedule_orchestrator import ScheduleOrchestrator
from vis_timetables.application.services.schedule_view_builder import ScheduleViewBuilder
from vis_timetables.application.services.timeline_builder import TimelineBuilder

__all__ = [
    "CARRIER_RULES",
    "CarrierResolver",
    "CarrierRule",
    "DayTypeResolver",
    "DirectionSelector",
    "ScheduleOrchestrator",
    "ScheduleViewBuilder",
    "TimelineBuilder",
    "normalize_url",
]
