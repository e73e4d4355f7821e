"""Timetable resolution for Vis municipal road and sea transport."""

__version__ = "0.1.0"
