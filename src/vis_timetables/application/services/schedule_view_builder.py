"""Builder for display-ready timetable views."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

from vis_timetables.application.services.carrier_resolver import normalize_url
from vis_timetables.application.services.day_type_resolver import DayTypeResolver
from vis_timetables.application.services.direction_selector import DirectionSelector
from vis_timetables.domain.models.clock import format_clock
from vis_timetables.domain.models.schedule_view import DepartureView, DirectionTab, ScheduleView

if TYPE_CHECKING:
    from vis_timetables.application.services.carrier_resolver import CarrierResolver
    from vis_timetables.application.services.timeline_builder import TimelineBuilder
    from vis_timetables.domain.contracts.holiday_calendar import HolidayCalendarProtocol
    from vis_timetables.domain.models.departure import Departure
    from vis_timetables.domain.models.line import Contact, Route
    from vis_timetables.domain.models.schedule_state import ScheduleState


class ScheduleViewBuilder:
    """Combines schedule state with the pure resolvers into a ScheduleView."""

    def __init__(
        self,
        timeline_builder: TimelineBuilder,
        carrier_resolver: CarrierResolver,
        holiday_calendar: HolidayCalendarProtocol,
    ) -> None:
        """Initialize the builder.

        Args:
            timeline_builder: Builds per-departure stop timelines.
            carrier_resolver: Resolves carrier and ticket channel.
            holiday_calendar: Public holidays for day type resolution.
        """
        self.timeline_builder = timeline_builder
        self.carrier_resolver = carrier_resolver
        self.holiday_calendar = holiday_calendar

    def build(self, state: ScheduleState) -> ScheduleView:
        """Build the view of the current schedule state."""
        service_date = state.selected_date
        holiday = self.holiday_calendar.holiday_for(service_date)
        day_type = DayTypeResolver.resolve_for_calendar(service_date, self.holiday_calendar)

        line = state.line
        if line is None:
            return ScheduleView(
                line_id=state.line_id,
                transport_mode=state.transport_mode,
                service_date=service_date,
                day_type=day_type,
                is_holiday=holiday is not None,
                holiday_name=holiday.name(state.language) if holiday else None,
                loading=state.loading,
                refreshing=state.refreshing,
                error=state.error,
            )

        selector = DirectionSelector(line.routes, state.selected_direction)
        current_route = selector.current_route
        carrier = self.carrier_resolver.resolve(line.line_number, line.contacts)

        return ScheduleView(
            line_id=line.id,
            transport_mode=line.transport_mode,
            service_date=service_date,
            day_type=day_type,
            is_holiday=holiday is not None,
            holiday_name=holiday.name(state.language) if holiday else None,
            line_name=line.name,
            line_number=line.line_number,
            subtype=line.subtype,
            show_direction_toggle=selector.show_direction_toggle,
            direction_tabs=self._build_direction_tabs(selector),
            current_route=current_route,
            departures=[
                self._build_departure_view(departure, current_route)
                for departure in state.departures or []
            ],
            departures_loaded=state.departures is not None,
            marker_note=current_route.marker_note if current_route else None,
            carrier=carrier,
            ticket_display=self.carrier_resolver.ticket_display(carrier),
            contacts=[self._display_contact(c) for c in line.contacts],
            banners=list(state.banners),
            loading=state.loading,
            refreshing=state.refreshing,
            error=state.error,
        )

    @staticmethod
    def _display_contact(contact: Contact) -> Contact:
        if not contact.website:
            return contact
        return dataclasses.replace(contact, website=normalize_url(contact.website))

    def _build_direction_tabs(self, selector: DirectionSelector) -> list[DirectionTab]:
        if not selector.show_direction_toggle:
            return []
        return [
            DirectionTab(
                direction=route.direction,
                label=route.direction_label,
                is_active=route.direction == selector.selected_direction,
            )
            for route in selector.routes_in_display_order
        ]

    def _build_departure_view(self, departure: Departure, route: Route | None) -> DepartureView:
        return DepartureView(
            id=departure.id,
            departure_time=format_clock(departure.departure_time),
            destination=departure.destination,
            marker=departure.marker,
            notes=departure.notes,
            duration_minutes=self.timeline_builder.trip_duration_minutes(departure, route),
            timeline=self.timeline_builder.build(departure),
        )
