"""HTTP departure repository adapter."""

import logging
from datetime import date

from vis_timetables.adapters.transport_api.http_client import TransportHttpClient
from vis_timetables.adapters.transport_api.parsers import TransportParser
from vis_timetables.domain.models.departure import Departure
from vis_timetables.domain.models.transport_mode import TransportMode
from vis_timetables.domain.ports.departure_repository import DepartureRepository

logger = logging.getLogger(__name__)


class HttpDepartureRepository(DepartureRepository):
    """Adapter for line departures served by the transport API."""

    def __init__(self, http_client: TransportHttpClient) -> None:
        """Initialize with a transport HTTP client.

        Args:
            http_client: Client bound to the configured API base URL.
        """
        self._http_client = http_client

    async def get_departures(
        self,
        transport_mode: TransportMode,
        line_id: str,
        service_date: date,
        direction: int,
        language: str,
    ) -> list[Departure]:
        """Get departures of a line for one date and direction.

        Args:
            transport_mode: Road or sea.
            line_id: Line identifier.
            service_date: Date to get departures for.
            direction: Direction index of the route.
            language: Display language for localized fields.

        Returns:
            Departures in API order. Empty when the line does not run that day.
        """
        data = await self._http_client.fetch_departures(
            transport_mode, line_id, service_date, direction, language
        )
        departures = TransportParser.parse_departures(data)
        if not departures:
            logger.debug(
                f"No departures for line {line_id} on {service_date.isoformat()} "
                f"direction {direction}"
            )
        return departures
