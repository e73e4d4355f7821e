"""HTTP banner repository adapter."""

from vis_timetables.adapters.transport_api.http_client import TransportHttpClient
from vis_timetables.adapters.transport_api.parsers import TransportParser
from vis_timetables.domain.models.banner import Banner, BannerContext
from vis_timetables.domain.ports.banner_repository import BannerRepository


class HttpBannerRepository(BannerRepository):
    """Adapter for active advisory banners."""

    def __init__(self, http_client: TransportHttpClient) -> None:
        self._http_client = http_client

    async def get_active_banners(self, context: BannerContext, language: str) -> list[Banner]:
        data = await self._http_client.fetch_active_banners(context, language)
        return TransportParser.parse_banners(data)
