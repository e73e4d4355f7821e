"""Builds display timelines for departures."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from vis_timetables.domain.models.clock import (
    MINUTES_PER_DAY,
    format_clock,
    parse_clock_minutes,
)
from vis_timetables.domain.models.timeline_entry import TimelineEntry

if TYPE_CHECKING:
    from vis_timetables.domain.models.departure import Departure, StopTime
    from vis_timetables.domain.models.line import Route

logger = logging.getLogger(__name__)


class TimelineBuilder:
    """Turns the stop times of a departure into timeline entries."""

    @staticmethod
    def serviced_stop_times(departure: Departure) -> list[StopTime]:
        """Stop times where the vehicle actually calls, in route order."""
        return [st for st in departure.stop_times if st.arrival_time is not None]

    def build(self, departure: Departure) -> list[TimelineEntry]:
        """Build the timeline of a departure.

        Stops without an arrival time are left out entirely. Each remaining
        stop is compared with the departure time of the trip (not with the
        previous stop) to tell whether it is reached after midnight.

        Args:
            departure: Departure with its ordered stop times.

        Returns:
            One entry per serviced stop. Empty when the departure has no
            stop detail.
        """
        serviced = self.serviced_stop_times(departure)
        if not serviced:
            return []

        departure_minutes = parse_clock_minutes(departure.departure_time)
        last_index = len(serviced) - 1
        entries: list[TimelineEntry] = []
        for index, stop_time in enumerate(serviced):
            arrival_time = stop_time.arrival_time or ""
            is_first = index == 0
            crosses_midnight = (
                not is_first and parse_clock_minutes(arrival_time) < departure_minutes
            )
            entries.append(
                TimelineEntry(
                    stop_name=stop_time.stop_name,
                    arrival_time=format_clock(arrival_time),
                    is_first=is_first,
                    is_last=index == last_index,
                    crosses_midnight=crosses_midnight,
                )
            )

        skipped = len(departure.stop_times) - len(serviced)
        if skipped:
            logger.debug(f"Departure {departure.id}: left out {skipped} stop(s) without service")
        return entries

    def has_stop_detail(self, departure: Departure) -> bool:
        return bool(self.serviced_stop_times(departure))

    def trip_duration_minutes(
        self, departure: Departure, route: Route | None = None
    ) -> int | None:
        """Duration of a trip in minutes.

        Uses the duration carried by the departure when present, otherwise
        the span from the first to the last serviced stop (wrapping once past
        midnight), otherwise the typical duration of the route.
        """
        if departure.duration_minutes is not None:
            return departure.duration_minutes

        serviced = self.serviced_stop_times(departure)
        if len(serviced) >= 2:
            first = parse_clock_minutes(serviced[0].arrival_time or "")
            last = parse_clock_minutes(serviced[-1].arrival_time or "")
            duration = last - first
            if duration < 0:
                duration += MINUTES_PER_DAY
            return duration

        if route is not None:
            return route.typical_duration_minutes
        return None
