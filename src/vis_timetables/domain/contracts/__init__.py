"""Contracts (protocols) for configuration data sources."""

from vis_timetables.domain.contracts.carrier_directory import CarrierDirectoryProtocol
from vis_timetables.domain.contracts.holiday_calendar import HolidayCalendarProtocol

__all__ = ["CarrierDirectoryProtocol", "HolidayCalendarProtocol"]
