"""HTTP client for the municipal transport API.

Endpoints:
    GET /transport/{mode}/lines/{id}
    GET /transport/{mode}/lines/{id}/departures?date=YYYY-MM-DD&direction=N
    GET /banners/active?screen={screen}
"""

from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import TYPE_CHECKING, Any

import aiohttp

from vis_timetables.adapters.api_request_logger import log_api_request
from vis_timetables.adapters.transport_api.errors import TransportApiError

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

    from vis_timetables.adapters.config.app_config import AppConfig
    from vis_timetables.domain.models.banner import BannerContext
    from vis_timetables.domain.models.transport_mode import TransportMode

logger = logging.getLogger(__name__)


class TransportHttpClient:
    """HTTP client for the transport and banner endpoints."""

    def __init__(self, config: AppConfig, session: ClientSession | None = None) -> None:
        """Initialize with app config and an optional aiohttp session.

        Args:
            config: Application configuration (base URL, timeout, client identity).
            session: Shared aiohttp session. Requests fail without one.
        """
        self._config = config
        self._session = session

    def _headers(self, language: str, context: BannerContext | None = None) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Accept-Language": language,
            "X-Device-ID": context.device_id if context else self._config.device_id,
            "X-User-Mode": context.user_mode if context else self._config.user_mode,
        }
        municipality = context.municipality if context else self._config.municipality
        if municipality:
            headers["X-Municipality"] = municipality
        return headers

    async def _log_error_response(self, response: ClientResponse, url: str) -> None:
        """Log error response details."""
        error_text = await response.text()
        error_body = error_text[:500] if error_text else "(empty response body)"
        content_type = response.headers.get("Content-Type", "unknown")
        logger.error(
            f"Transport API returned status {response.status} for {url}: "
            f"{error_body} (Content-Type: {content_type})"
        )

    async def get_json(
        self,
        path: str,
        language: str,
        params: dict[str, str | int] | None = None,
        context: BannerContext | None = None,
    ) -> Any:
        """GET a JSON document from the API.

        Raises:
            TransportApiError: On a missing session, a non-200 status, a
                network failure or a timeout.
        """
        if not self._session:
            raise TransportApiError("No HTTP session available for transport API")

        url = f"{self._config.api_base_url}{path}"
        headers = self._headers(language, context)
        log_api_request("GET", url, params=params, headers=headers)

        timeout = aiohttp.ClientTimeout(total=self._config.api_timeout_seconds)
        try:
            async with self._session.get(
                url, params=params, headers=headers, timeout=timeout
            ) as response:
                if response.status != 200:
                    await self._log_error_response(response, url)
                    raise TransportApiError(
                        f"API Error: ({response.status}) {response.reason or ''}".strip(),
                        status_code=response.status,
                    )
                return await response.json()
        except asyncio.TimeoutError as e:
            raise TransportApiError(f"Timeout requesting {url}") from e
        except aiohttp.ClientError as e:
            raise TransportApiError(f"Error requesting {url}: {e}") from e

    async def fetch_line(self, transport_mode: TransportMode, line_id: str, language: str) -> Any:
        """Fetch raw line detail JSON."""
        return await self.get_json(f"/transport/{transport_mode.value}/lines/{line_id}", language)

    async def fetch_departures(
        self,
        transport_mode: TransportMode,
        line_id: str,
        service_date: date,
        direction: int,
        language: str,
    ) -> Any:
        """Fetch raw departures JSON for a date and direction."""
        params: dict[str, str | int] = {
            "date": service_date.isoformat(),
            "direction": direction,
        }
        return await self.get_json(
            f"/transport/{transport_mode.value}/lines/{line_id}/departures",
            language,
            params=params,
        )

    async def fetch_active_banners(self, context: BannerContext, language: str) -> Any:
        """Fetch raw active banners JSON for a screen context."""
        return await self.get_json(
            "/banners/active",
            language,
            params={"screen": context.screen},
            context=context,
        )
