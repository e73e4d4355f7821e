"""Departure repository port."""

from datetime import date
from typing import Protocol

from vis_timetables.domain.models.departure import Departure
from vis_timetables.domain.models.transport_mode import TransportMode


class DepartureRepository(Protocol):
    """Port for retrieving departures of a line."""

    async def get_departures(
        self,
        transport_mode: TransportMode,
        line_id: str,
        service_date: date,
        direction: int,
        language: str,
    ) -> list[Departure]:
        """Get departures for exactly this date and direction.

        An empty list is a valid result, not an error.
        """
        ...
