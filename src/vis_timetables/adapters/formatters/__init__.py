"""Formatters for timetable output."""

from vis_timetables.adapters.formatters.timetable_formatter import TimetableFormatter

__all__ = ["TimetableFormatter"]
