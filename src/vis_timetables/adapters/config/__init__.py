"""Configuration adapters."""

from vis_timetables.adapters.config.app_config import AppConfig
from vis_timetables.adapters.config.carrier_directory_loader import (
    CarrierDirectoryLoader,
    StaticCarrierDirectory,
)
from vis_timetables.adapters.config.holiday_calendar_loader import (
    HolidayCalendarLoader,
    StaticHolidayCalendar,
)

__all__ = [
    "AppConfig",
    "CarrierDirectoryLoader",
    "HolidayCalendarLoader",
    "StaticCarrierDirectory",
    "StaticHolidayCalendar",
]
