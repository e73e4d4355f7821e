"""Adapters layer - external system integrations."""

from vis_timetables.adapters.config import AppConfig
from vis_timetables.adapters.formatters import TimetableFormatter
from vis_timetables.adapters.transport_api import (
    HttpBannerRepository,
    HttpDepartureRepository,
    HttpLineRepository,
    TransportHttpClient,
)

__all__ = [
    "AppConfig",
    "HttpBannerRepository",
    "HttpDepartureRepository",
    "HttpLineRepository",
    "TimetableFormatter",
    "TransportHttpClient",
]
