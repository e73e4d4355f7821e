"""Clock time helpers for HH:MM[:SS] timetable values."""

import re

_CLOCK_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")

MINUTES_PER_DAY = 24 * 60


def _split_clock(value: str) -> tuple[int, int]:
    match = _CLOCK_PATTERN.match(value.strip())
    if not match:
        raise ValueError(f"Invalid clock time {value!r}, expected HH:MM or HH:MM:SS")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if minutes > 59:
        raise ValueError(f"Invalid clock time {value!r}, minutes out of range")
    return hours, minutes


def parse_clock_minutes(value: str) -> int:
    """Convert HH:MM or HH:MM:SS to minutes since midnight. Seconds are ignored."""
    hours, minutes = _split_clock(value)
    return hours * 60 + minutes


def format_clock(value: str) -> str:
    """Format a clock time as HH:MM, stripping seconds."""
    hours, minutes = _split_clock(value)
    return f"{hours:02d}:{minutes:02d}"


def is_clock_time(value: str) -> bool:
    try:
        _split_clock(value)
    except ValueError:
        return False
    return True
