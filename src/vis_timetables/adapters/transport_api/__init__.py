"""Transport API adapters for the municipal backend."""

from vis_timetables.adapters.transport_api.banner_repository import HttpBannerRepository
from vis_timetables.adapters.transport_api.departure_repository import HttpDepartureRepository
from vis_timetables.adapters.transport_api.errors import TransportApiError
from vis_timetables.adapters.transport_api.http_client import TransportHttpClient
from vis_timetables.adapters.transport_api.line_repository import HttpLineRepository
from vis_timetables.adapters.transport_api.parsers import TransportParser

__all__ = [
    "HttpBannerRepository",
    "HttpDepartureRepository",
    "HttpLineRepository",
    "TransportApiError",
    "TransportHttpClient",
    "TransportParser",
]
