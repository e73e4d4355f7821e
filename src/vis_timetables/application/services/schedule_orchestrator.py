"""Coordinates line and departures fetches for a timetable screen."""

from __future__ import annotations

import asyncio
import logging
from datetime import date, timedelta
from typing import TYPE_CHECKING

from vis_timetables.application.services.day_type_resolver import DayTypeResolver
from vis_timetables.application.services.direction_selector import DirectionSelector
from vis_timetables.domain.models.error_details import ErrorDetails
from vis_timetables.domain.models.queries import DeparturesQuery, LineQuery
from vis_timetables.domain.models.schedule_state import ScheduleState

if TYPE_CHECKING:
    from vis_timetables.domain.contracts.holiday_calendar import HolidayCalendarProtocol
    from vis_timetables.domain.models.banner import BannerContext
    from vis_timetables.domain.models.day_type import DayType
    from vis_timetables.domain.models.holiday import Holiday
    from vis_timetables.domain.models.line import Route
    from vis_timetables.domain.models.transport_mode import TransportMode
    from vis_timetables.domain.ports import (
        BannerRepository,
        DepartureRepository,
        LineRepository,
    )

logger = logging.getLogger(__name__)


class ScheduleOrchestrator:
    """Owns the fetch lifecycle and UI-facing state of one line timetable.

    Line metadata and banners are fetched together; departures are fetched
    once the line has loaded and again whenever line, date, direction or
    language change. A fetch result is applied only if it belongs to the
    most recently issued request of its kind and its inputs still match the
    current state. There is no cancellation; stale results are dropped.
    """

    def __init__(
        self,
        line_repository: LineRepository,
        departure_repository: DepartureRepository,
        banner_repository: BannerRepository,
        holiday_calendar: HolidayCalendarProtocol,
        banner_context: BannerContext,
        line_id: str,
        transport_mode: TransportMode,
        language: str,
        selected_date: date,
        selected_direction: int = 0,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            line_repository: Source of line metadata.
            departure_repository: Source of departures per date and direction.
            banner_repository: Source of advisory banners.
            holiday_calendar: Public holidays for day type resolution.
            banner_context: Context sent with banner requests.
            line_id: Line to show.
            transport_mode: Road or sea.
            language: Display language ("hr" or "en").
            selected_date: Date to show departures for.
            selected_direction: Direction shown first.
        """
        self._line_repository = line_repository
        self._departure_repository = departure_repository
        self._banner_repository = banner_repository
        self._holiday_calendar = holiday_calendar
        self._banner_context = banner_context
        self.state = ScheduleState(
            line_id=line_id,
            transport_mode=transport_mode,
            language=language,
            selected_date=selected_date,
            selected_direction=selected_direction,
        )
        self._line_request_id = 0
        self._departures_request_id = 0

    # Derived state

    @property
    def line_query(self) -> LineQuery:
        return LineQuery(
            line_id=self.state.line_id,
            transport_mode=self.state.transport_mode,
            language=self.state.language,
        )

    @property
    def departures_query(self) -> DeparturesQuery:
        return DeparturesQuery(
            line_id=self.state.line_id,
            transport_mode=self.state.transport_mode,
            date=self.state.selected_date,
            direction=self.state.selected_direction,
            language=self.state.language,
        )

    @property
    def departures_enabled(self) -> bool:
        """Departures are fetched only after the line loaded successfully."""
        return self.state.line is not None and self.state.error is None

    @property
    def direction_selector(self) -> DirectionSelector:
        routes = self.state.line.routes if self.state.line else []
        return DirectionSelector(routes, self.state.selected_direction)

    @property
    def current_route(self) -> Route | None:
        return self.direction_selector.current_route

    @property
    def day_type(self) -> DayType:
        return DayTypeResolver.resolve_for_calendar(self.state.selected_date, self._holiday_calendar)

    @property
    def holiday(self) -> Holiday | None:
        return self._holiday_calendar.holiday_for(self.state.selected_date)

    # Triggers

    async def load(self) -> None:
        """Initial load of line metadata, then departures."""
        self.state.loading = True
        await self._fetch_line()

    async def refresh(self) -> None:
        """Manual refresh. Currently shown data stays visible until replaced."""
        self.state.refreshing = True
        await self._fetch_line()

    async def set_line(self, line_id: str, transport_mode: TransportMode | None = None) -> None:
        """Switch to another line (and optionally transport mode)."""
        new_mode = transport_mode or self.state.transport_mode
        if line_id == self.state.line_id and new_mode == self.state.transport_mode:
            return
        self.state.line_id = line_id
        self.state.transport_mode = new_mode
        await self._reload_for_new_line()

    async def set_language(self, language: str) -> None:
        """Switch display language; line and departures are fetched again."""
        if language == self.state.language:
            return
        self.state.language = language
        await self._reload_for_new_line()

    async def set_date(self, service_date: date) -> None:
        """Show departures for another date."""
        if service_date == self.state.selected_date:
            return
        self.state.selected_date = service_date
        await self._fetch_departures()

    async def shift_date(self, days: int) -> None:
        """Move the selected date by a number of days (negative goes back)."""
        await self.set_date(self.state.selected_date + timedelta(days=days))

    async def select_direction(self, direction: int) -> bool:
        """Select a direction of the loaded line.

        Args:
            direction: Direction index to switch to.

        Returns:
            False if the line does not offer direction; the previous
            selection is kept and nothing is fetched.
        """
        selector = self.direction_selector
        if not selector.select(direction):
            return False
        if direction == self.state.selected_direction:
            return True
        self.state.selected_direction = direction
        await self._fetch_departures()
        return True

    # Fetches

    async def _reload_for_new_line(self) -> None:
        """Drop everything that belongs to the previous line query and load again."""
        self.state.line = None
        self.state.banners = []
        self.state.departures = None
        self.state.departures_query = None
        self.state.departures_error = None
        self._abandon_departures_request()
        self.state.loading = True
        await self._fetch_line()

    def _abandon_departures_request(self) -> None:
        """Invalidate any pending departures fetch so its result is dropped."""
        self._departures_request_id += 1
        self.state.departures_loading = False

    def _is_current_line_request(self, request_id: int, query: LineQuery) -> bool:
        return request_id == self._line_request_id and query == self.line_query

    def _is_current_departures_request(self, request_id: int, query: DeparturesQuery) -> bool:
        return request_id == self._departures_request_id and query == self.departures_query

    async def _fetch_line(self) -> None:
        """Fetch line metadata and banners concurrently and join both."""
        self._line_request_id += 1
        request_id = self._line_request_id
        query = self.line_query
        self.state.error = None
        logger.info(
            f"Fetching line {query.line_id} ({query.transport_mode.value}, {query.language})"
        )

        results = await asyncio.gather(
            self._line_repository.get_line(query.transport_mode, query.line_id, query.language),
            self._banner_repository.get_active_banners(self._banner_context, query.language),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException) and not isinstance(result, Exception):
                raise result

        if not self._is_current_line_request(request_id, query):
            logger.debug(f"Discarding stale line result for {query}")
            return

        self.state.loading = False
        self.state.refreshing = False

        line_result, banners_result = results
        failure = next((r for r in results if isinstance(r, Exception)), None)
        if failure is not None:
            logger.error(f"Failed to fetch line {query.line_id}: {failure}", exc_info=failure)
            self.state.error = ErrorDetails.from_exception(failure)
            self._abandon_departures_request()
            return

        self.state.line = line_result  # type: ignore[assignment]
        self.state.banners = banners_result  # type: ignore[assignment]
        selector = self.direction_selector
        if selector.current_route is None:
            logger.warning(
                f"Line {query.line_id} has no route for direction "
                f"{self.state.selected_direction}, available: {selector.available_directions}"
            )
        await self._fetch_departures()

    async def _fetch_departures(self) -> None:
        """Fetch departures for the current inputs if the line is loaded."""
        if not self.departures_enabled:
            logger.debug("Skipping departures fetch, line not loaded")
            return

        self._departures_request_id += 1
        request_id = self._departures_request_id
        query = self.departures_query
        self.state.departures_loading = True
        logger.info(
            f"Fetching departures for line {query.line_id} on {query.date.isoformat()} "
            f"direction {query.direction}"
        )

        try:
            departures = await self._departure_repository.get_departures(
                query.transport_mode,
                query.line_id,
                query.date,
                query.direction,
                query.language,
            )
        except Exception as e:
            if not self._is_current_departures_request(request_id, query):
                logger.debug(f"Ignoring failure of stale departures request {query}: {e}")
                return
            # Not surfaced to the user; previously shown departures stay
            logger.error(f"Failed to fetch departures for {query}: {e}", exc_info=True)
            self.state.departures_error = ErrorDetails.from_exception(e)
            self.state.departures_loading = False
            return

        if not self._is_current_departures_request(request_id, query):
            logger.debug(f"Discarding stale departures result for {query}")
            return

        self.state.departures = departures
        self.state.departures_query = query
        self.state.departures_error = None
        self.state.departures_loading = False
        logger.debug(f"Loaded {len(departures)} departures for {query}")
