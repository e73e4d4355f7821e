"""Domain layer - core models and interfaces."""

from vis_timetables.domain.models import (
    CarrierInfo,
    DayType,
    Departure,
    Line,
    Route,
    TimelineEntry,
)
from vis_timetables.domain.ports import (
    BannerRepository,
    DepartureRepository,
    LineRepository,
)

__all__ = [
    "BannerRepository",
    "CarrierInfo",
    "DayType",
    "Departure",
    "DepartureRepository",
    "Line",
    "LineRepository",
    "Route",
    "TimelineEntry",
]
