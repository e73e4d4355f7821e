"""Banner repository port."""

from typing import Protocol

from vis_timetables.domain.models.banner import Banner, BannerContext


class BannerRepository(Protocol):
    """Port for retrieving contextual advisory banners."""

    async def get_active_banners(self, context: BannerContext, language: str) -> list[Banner]:
        """Get banners currently active for the given context, localized to language."""
        ...
