"""Public holiday calendar loader."""

from __future__ import annotations

import json
import logging
from datetime import date
from importlib import resources
from pathlib import Path
from typing import Any

from vis_timetables.adapters.config.app_config import AppConfig
from vis_timetables.domain.contracts.holiday_calendar import HolidayCalendarProtocol
from vis_timetables.domain.models.holiday import Holiday

logger = logging.getLogger(__name__)

PACKAGED_HOLIDAY_FILES = ("holidays-hr-2026.json",)


class StaticHolidayCalendar(HolidayCalendarProtocol):
    """Holiday calendar backed by a fixed list of holidays."""

    def __init__(self, holidays: list[Holiday]) -> None:
        """Initialize the calendar.

        Args:
            holidays: Public holidays, any order.
        """
        self._holidays = {holiday.date: holiday for holiday in holidays}

    def holiday_dates(self) -> set[date]:
        return set(self._holidays)

    def holiday_for(self, day: date) -> Holiday | None:
        return self._holidays.get(day)


class HolidayCalendarLoader:
    """Loads public holidays from JSON files."""

    @staticmethod
    def load(config: AppConfig) -> StaticHolidayCalendar:
        """Load the holiday calendar configured in app config.

        Uses holidays_file when set, otherwise the packaged holiday lists.
        """
        holidays: list[Holiday] = []
        if config.holidays_file:
            holidays_path = Path(config.holidays_file)
            if not holidays_path.exists():
                raise FileNotFoundError(f"Holidays file not found: {holidays_path}")
            with open(holidays_path, encoding="utf-8") as f:
                holidays.extend(HolidayCalendarLoader.parse(json.load(f)))
            logger.info(f"Loaded {len(holidays)} holidays from {holidays_path}")
        else:
            data_dir = resources.files("vis_timetables.data")
            for file_name in PACKAGED_HOLIDAY_FILES:
                with data_dir.joinpath(file_name).open("r", encoding="utf-8") as f:
                    holidays.extend(HolidayCalendarLoader.parse(json.load(f)))

        return StaticHolidayCalendar(holidays)

    @staticmethod
    def parse(data: dict[str, Any]) -> list[Holiday]:
        """Parse holidays from the JSON structure.

        Raises ValueError if an entry is malformed.
        """
        entries = data.get("holidays") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            raise ValueError("Holidays file must contain a 'holidays' list")

        holidays: list[Holiday] = []
        for entry in entries:
            if not isinstance(entry, dict) or "date" not in entry:
                raise ValueError(f"Invalid holiday entry: {entry!r}")
            try:
                holiday_date = date.fromisoformat(str(entry["date"]))
            except ValueError as e:
                raise ValueError(f"Invalid holiday date {entry['date']!r}: {e}") from e
            name_hr = str(entry.get("name_hr", ""))
            name_en = str(entry.get("name_en", "")) or name_hr
            holidays.append(Holiday(date=holiday_date, name_hr=name_hr, name_en=name_en))
        return holidays
