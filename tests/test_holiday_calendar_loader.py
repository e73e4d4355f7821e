"""Tests for the holiday calendar loader."""

import json
from datetime import date
from pathlib import Path

import pytest

from vis_timetables.adapters.config import AppConfig, HolidayCalendarLoader


def test_load_packaged_calendar() -> None:
    """Given no holidays file, when loading, then the packaged Croatian holidays are used."""
    calendar = HolidayCalendarLoader.load(AppConfig.for_testing())

    assert date(2026, 1, 1) in calendar.holiday_dates()
    assert date(2026, 4, 6) in calendar.holiday_dates()
    assert date(2026, 4, 7) not in calendar.holiday_dates()
    holiday = calendar.holiday_for(date(2026, 12, 25))
    assert holiday is not None
    assert holiday.name("hr") == "Božić"
    assert holiday.name("en") == "Christmas Day"


def test_packaged_calendar_covers_only_2026() -> None:
    """Given the packaged calendar, when asking about 2027, then no holiday is known."""
    calendar = HolidayCalendarLoader.load(AppConfig.for_testing())

    assert {d.year for d in calendar.holiday_dates()} == {2026}
    assert calendar.holiday_for(date(2027, 12, 25)) is None


def test_load_custom_file(tmp_path: Path) -> None:
    """Given a holidays file, when loading, then its dates are used."""
    holidays_file = tmp_path / "holidays.json"
    holidays_file.write_text(
        json.dumps(
            {
                "country": "HR",
                "year": 2027,
                "holidays": [
                    {"date": "2027-03-28", "name_hr": "Uskrs", "name_en": "Easter Sunday"},
                    {"date": "2027-08-15", "name_hr": "Velika Gospa"},
                ],
            }
        ),
        encoding="utf-8",
    )

    calendar = HolidayCalendarLoader.load(AppConfig.for_testing(holidays_file=str(holidays_file)))

    assert calendar.holiday_dates() == {date(2027, 3, 28), date(2027, 8, 15)}
    assumption = calendar.holiday_for(date(2027, 8, 15))
    assert assumption is not None
    assert assumption.name("en") == "Velika Gospa"


def test_missing_file_raises(tmp_path: Path) -> None:
    """Given a holidays file path that does not exist, when loading, then it fails loudly."""
    config = AppConfig.for_testing(holidays_file=str(tmp_path / "missing.json"))

    with pytest.raises(FileNotFoundError, match="Holidays file not found"):
        HolidayCalendarLoader.load(config)


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"holidays": "2026-01-01"},
        {"holidays": [{"name_hr": "Bez datuma"}]},
        {"holidays": [{"date": "2026-13-01", "name_hr": "Krivi datum"}]},
    ],
)
def test_malformed_data_raises(data: dict[str, object]) -> None:
    """Given malformed holiday data, when parsing, then a ValueError is raised."""
    with pytest.raises(ValueError):
        HolidayCalendarLoader.parse(data)
