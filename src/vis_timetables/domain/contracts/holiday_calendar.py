"""Protocol for public holiday lookup."""

from datetime import date
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from vis_timetables.domain.models.holiday import Holiday


class HolidayCalendarProtocol(Protocol):
    """Protocol for the set of public holidays."""

    def holiday_dates(self) -> set[date]:
        """Get all dates flagged as public holidays."""
        ...

    def holiday_for(self, day: date) -> "Holiday | None":
        """Get the holiday falling on day, or None if it is a regular day."""
        ...
