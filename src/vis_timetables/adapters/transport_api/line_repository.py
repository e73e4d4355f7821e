"""HTTP line repository adapter."""

import logging

from vis_timetables.adapters.transport_api.http_client import TransportHttpClient
from vis_timetables.adapters.transport_api.parsers import TransportParser
from vis_timetables.domain.models.line import Line
from vis_timetables.domain.models.transport_mode import TransportMode
from vis_timetables.domain.ports.line_repository import LineRepository

logger = logging.getLogger(__name__)


class HttpLineRepository(LineRepository):
    """Adapter for line metadata served by the transport API."""

    def __init__(self, http_client: TransportHttpClient) -> None:
        self._http_client = http_client

    async def get_line(self, transport_mode: TransportMode, line_id: str, language: str) -> Line:
        data = await self._http_client.fetch_line(transport_mode, line_id, language)
        line = TransportParser.parse_line(data, transport_mode)
        logger.debug(f"Parsed line {line.id} with {len(line.routes)} routes")
        return line
