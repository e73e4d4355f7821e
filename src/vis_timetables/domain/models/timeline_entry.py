"""Timeline entry domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TimelineEntry:
    """A serviced stop of a departure, ready for display."""

    stop_name: str
    arrival_time: str  # HH:MM, seconds stripped
    is_first: bool
    is_last: bool
    crosses_midnight: bool
