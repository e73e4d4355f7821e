"""Formatter for timetable text in Croatian and English."""

from datetime import date

from vis_timetables.domain.models.carrier_info import TicketDisplay
from vis_timetables.domain.models.day_type import DayType
from vis_timetables.domain.models.schedule_view import DepartureView, ScheduleView

DAY_TYPE_LABELS: dict[str, dict[DayType, str]] = {
    "hr": {
        DayType.MON: "Ponedjeljak",
        DayType.TUE: "Utorak",
        DayType.WED: "Srijeda",
        DayType.THU: "Četvrtak",
        DayType.FRI: "Petak",
        DayType.SAT: "Subota",
        DayType.SUN: "Nedjelja",
        DayType.PRAZNIK: "Praznik",
    },
    "en": {
        DayType.MON: "Monday",
        DayType.TUE: "Tuesday",
        DayType.WED: "Wednesday",
        DayType.THU: "Thursday",
        DayType.FRI: "Friday",
        DayType.SAT: "Saturday",
        DayType.SUN: "Sunday",
        DayType.PRAZNIK: "Public holiday",
    },
}

# Weekday names for dates, independent of holidays
_WEEKDAY_DAY_TYPES = (
    DayType.MON,
    DayType.TUE,
    DayType.WED,
    DayType.THU,
    DayType.FRI,
    DayType.SAT,
    DayType.SUN,
)

_TEXTS: dict[str, dict[str, str]] = {
    "hr": {
        "next_day": "(+1 dan)",
        "no_departures": "Nema polazaka za odabrani datum.",
        "not_loaded": "Polasci nisu učitani.",
        "loading": "Učitavanje...",
        "error": "Greška pri učitavanju linije",
        "tickets": "Karte",
        "boarding_only": "Karte se kupuju pri ukrcaju.",
        "tickets_fallback": "Informacije o kartama dostupne su kod prijevoznika.",
        "contacts": "Kontakti",
        "holiday": "Praznik",
    },
    "en": {
        "next_day": "(+1 day)",
        "no_departures": "No departures on the selected date.",
        "not_loaded": "Departures not loaded.",
        "loading": "Loading...",
        "error": "Failed to load line",
        "tickets": "Tickets",
        "boarding_only": "Tickets are sold on board.",
        "tickets_fallback": "Ask the operator for ticket information.",
        "contacts": "Contacts",
        "holiday": "Public holiday",
    },
}


def _texts(language: str) -> dict[str, str]:
    return _TEXTS.get(language, _TEXTS["hr"])


class TimetableFormatter:
    """Formats timetable values and renders a ScheduleView as plain text."""

    def __init__(self, language: str = "hr") -> None:
        """Initialize the formatter.

        Args:
            language: Display language, "hr" or "en". Unknown languages fall back to "hr".
        """
        self.language = language if language in _TEXTS else "hr"

    @staticmethod
    def format_duration(minutes: int | None) -> str:
        """Format a trip duration (e.g., '45 min', '1h 30min', '2h').

        Args:
            minutes: Duration in minutes, or None.

        Returns:
            Formatted duration, or an empty string for None or zero.
        """
        if not minutes:
            return ""
        if minutes < 60:
            return f"{minutes} min"
        hours, mins = divmod(minutes, 60)
        return f"{hours}h {mins}min" if mins else f"{hours}h"

    @staticmethod
    def format_line_title(line_number: str | None, origin: str, destination: str) -> str:
        """Format a line title like '602: Vis-Split'."""
        route = f"{origin}-{destination}"
        return f"{line_number}: {route}" if line_number else route

    def _language(self, language: str | None) -> str:
        if language is not None and language in _TEXTS:
            return language
        return self.language

    def day_type_label(self, day_type: DayType, language: str | None = None) -> str:
        return DAY_TYPE_LABELS[self._language(language)][day_type]

    def next_day_suffix(self, language: str | None = None) -> str:
        return _texts(self._language(language))["next_day"]

    def format_date(self, value: date, language: str | None = None) -> str:
        """Format a date with its weekday (e.g., 'Petak, 05.06.2026.' or 'Friday, 2026-06-05')."""
        language = self._language(language)
        weekday = DAY_TYPE_LABELS[language][_WEEKDAY_DAY_TYPES[value.weekday()]]
        if language == "en":
            return f"{weekday}, {value.isoformat()}"
        return f"{weekday}, {value.strftime('%d.%m.%Y')}."

    def render(self, view: ScheduleView) -> str:
        """Render a schedule view as plain text lines.

        Args:
            view: View built from the current schedule state.

        Returns:
            Multi-line text for terminal output.
        """
        texts = _texts(self.language)
        if view.error is not None:
            return f"{texts['error']} {view.line_id}: {view.error.reason}"
        if view.loading:
            return texts["loading"]

        lines: list[str] = []
        for banner in view.banners:
            prefix = "!" if banner.is_urgent else "i"
            lines.append(f"[{prefix}] {banner.title}")

        route = view.current_route
        if route is not None:
            lines.append(self.format_line_title(view.line_number, route.origin, route.destination))
        else:
            lines.append(view.line_name or view.line_id)
        if view.subtype:
            lines.append(view.subtype)

        day_line = f"{self.format_date(view.service_date)} ({self.day_type_label(view.day_type)})"
        if view.holiday_name:
            day_line += f" - {view.holiday_name}"
        lines.append(day_line)

        if view.show_direction_toggle:
            tabs = [f"[{t.label}]" if t.is_active else t.label for t in view.direction_tabs]
            lines.append(" | ".join(tabs))

        lines.append("")
        if not view.departures_loaded:
            lines.append(texts["not_loaded"])
        elif not view.has_departures:
            lines.append(texts["no_departures"])
        for departure in view.departures:
            lines.extend(self._render_departure(departure))

        if view.marker_note:
            lines.extend(["", view.marker_note])

        lines.extend(["", f"{texts['tickets']}:", self._render_tickets(view)])

        if view.contacts:
            lines.extend(["", f"{texts['contacts']}:"])
            for contact in view.contacts:
                details = [d for d in (contact.phone, contact.email, contact.website) if d]
                lines.append("  " + ", ".join([contact.operator, *details]))

        return "\n".join(lines)

    def _render_departure(self, departure: DepartureView) -> list[str]:
        head = departure.departure_time
        if departure.marker:
            head += departure.marker
        head += f"  {departure.destination}"
        duration = self.format_duration(departure.duration_minutes)
        if duration:
            head += f"  ({duration})"
        rows = [head]
        if departure.notes:
            rows.append(f"    {departure.notes}")
        for entry in departure.timeline:
            suffix = f" {self.next_day_suffix()}" if entry.crosses_midnight else ""
            rows.append(f"    {entry.arrival_time}{suffix}  {entry.stop_name}")
        return rows

    def _render_tickets(self, view: ScheduleView) -> str:
        texts = _texts(self.language)
        carrier = view.carrier
        if view.ticket_display == TicketDisplay.LINK and carrier is not None:
            return f"  {carrier.name}: {carrier.ticket_url}"
        if view.ticket_display == TicketDisplay.BOARDING_ONLY and carrier is not None:
            return f"  {carrier.name}: {texts['boarding_only']}"
        return f"  {texts['tickets_fallback']}"
