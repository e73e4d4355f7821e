"""Line repository port."""

from typing import Protocol

from vis_timetables.domain.models.line import Line
from vis_timetables.domain.models.transport_mode import TransportMode


class LineRepository(Protocol):
    """Port for retrieving line metadata."""

    async def get_line(self, transport_mode: TransportMode, line_id: str, language: str) -> Line:
        """Get a line with its routes and contacts, localized to language."""
        ...
