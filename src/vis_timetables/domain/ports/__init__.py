"""Ports (interfaces) for the ports-and-adapters architecture."""

from vis_timetables.domain.ports.banner_repository import BannerRepository
from vis_timetables.domain.ports.departure_repository import DepartureRepository
from vis_timetables.domain.ports.line_repository import LineRepository

__all__ = [
    "BannerRepository",
    "DepartureRepository",
    "LineRepository",
]
