"""Mapping of calendar dates to schedule buckets."""

from __future__ import annotations

from collections.abc import Collection
from datetime import date, datetime
from typing import TYPE_CHECKING

from vis_timetables.domain.models.day_type import DayType

if TYPE_CHECKING:
    from vis_timetables.domain.contracts.holiday_calendar import HolidayCalendarProtocol

# ISO weekday (Monday=1 .. Sunday=7) -> day type
_WEEKDAY_DAY_TYPES = {
    1: DayType.MON,
    2: DayType.TUE,
    3: DayType.WED,
    4: DayType.THU,
    5: DayType.FRI,
    6: DayType.SAT,
    7: DayType.SUN,
}


def _calendar_day(day: date) -> date:
    if isinstance(day, datetime):
        return day.date()
    return day


class DayTypeResolver:
    """Resolves which schedule bucket applies to a date."""

    @staticmethod
    def is_holiday(day: date, holidays: Collection[date]) -> bool:
        """Check whether day is one of the given public holidays."""
        return _calendar_day(day) in holidays

    @staticmethod
    def resolve(day: date, holidays: Collection[date]) -> DayType:
        """Resolve the day type for a date.

        A public holiday always uses the PRAZNIK schedule, whatever weekday
        it falls on. Every other date maps to its own weekday.

        Args:
            day: Local calendar day. A datetime is reduced to its date.
            holidays: Dates flagged as public holidays.

        Returns:
            Exactly one DayType.
        """
        calendar_day = _calendar_day(day)
        if calendar_day in holidays:
            return DayType.PRAZNIK
        return _WEEKDAY_DAY_TYPES[calendar_day.isoweekday()]

    @classmethod
    def resolve_for_calendar(cls, day: date, calendar: HolidayCalendarProtocol) -> DayType:
        """Resolve the day type using a holiday calendar."""
        return cls.resolve(day, calendar.holiday_dates())
