"""Tests for day type resolution."""

from datetime import date, datetime, timedelta

import pytest

from vis_timetables.adapters.config import HolidayCalendarLoader, StaticHolidayCalendar
from vis_timetables.adapters.config.app_config import AppConfig
from vis_timetables.application.services import DayTypeResolver
from vis_timetables.domain.models import DayType, Holiday


@pytest.mark.parametrize(
    ("day", "expected"),
    [
        (date(2026, 6, 1), DayType.MON),
        (date(2026, 6, 2), DayType.TUE),
        (date(2026, 6, 3), DayType.WED),
        (date(2026, 6, 5), DayType.FRI),
        (date(2026, 6, 6), DayType.SAT),
        (date(2026, 6, 7), DayType.SUN),
        (date(2026, 7, 16), DayType.THU),
    ],
)
def test_resolve_maps_weekday_without_holidays(day: date, expected: DayType) -> None:
    """Given a date that is not a holiday, when resolved, then its own weekday is returned."""
    assert DayTypeResolver.resolve(day, set()) == expected


def test_resolve_returns_praznik_for_holiday_on_any_weekday() -> None:
    """Given holidays on every weekday, when resolved, then PRAZNIK always wins."""
    start = date(2026, 3, 2)
    holidays = {start + timedelta(days=i) for i in range(7)}

    results = {DayTypeResolver.resolve(day, holidays) for day in holidays}

    assert results == {DayType.PRAZNIK}


def test_resolve_covers_a_full_year_with_one_value_each() -> None:
    """Given every date of a year, when resolved, then each maps to one of the 8 day types."""
    holidays = {date(2026, 1, 1), date(2026, 12, 25)}
    day = date(2026, 1, 1)
    counts: dict[DayType, int] = {}
    while day.year == 2026:
        day_type = DayTypeResolver.resolve(day, holidays)
        assert isinstance(day_type, DayType)
        counts[day_type] = counts.get(day_type, 0) + 1
        day += timedelta(days=1)

    assert sum(counts.values()) == 365
    assert counts[DayType.PRAZNIK] == 2
    assert set(counts) == set(DayType)


def test_resolve_reduces_datetime_to_calendar_day() -> None:
    """Given a datetime on a holiday, when resolved, then the time of day is ignored."""
    holidays = {date(2026, 6, 4)}

    assert DayTypeResolver.resolve(datetime(2026, 6, 4, 23, 59), holidays) == DayType.PRAZNIK
    assert DayTypeResolver.is_holiday(datetime(2026, 6, 4, 0, 1), holidays) is True


def test_resolve_for_calendar_uses_calendar_dates() -> None:
    """Given a holiday calendar, when resolving through it, then its dates mark PRAZNIK."""
    calendar = StaticHolidayCalendar(
        [Holiday(date=date(2026, 8, 5), name_hr="Dan pobjede", name_en="Victory Day")]
    )

    assert DayTypeResolver.resolve_for_calendar(date(2026, 8, 5), calendar) == DayType.PRAZNIK
    assert DayTypeResolver.resolve_for_calendar(date(2026, 8, 6), calendar) == DayType.THU


def test_packaged_calendar_marks_corpus_christi_2026() -> None:
    """Given the packaged Croatian calendar, when resolving Tijelovo 2026, then it is PRAZNIK."""
    calendar = HolidayCalendarLoader.load(AppConfig.for_testing())

    # Thursday 4 June 2026
    assert DayTypeResolver.resolve_for_calendar(date(2026, 6, 4), calendar) == DayType.PRAZNIK
    assert DayTypeResolver.resolve_for_calendar(date(2026, 6, 11), calendar) == DayType.THU
