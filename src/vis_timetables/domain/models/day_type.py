"""Day type domain model."""

from enum import Enum


class DayType(str, Enum):
    """Schedule bucket a calendar date maps to.

    Schedules differ per weekday, so there is no generic WEEKDAY bucket.
    PRAZNIK (public holiday) takes precedence over the weekday.
    """

    MON = "MON"
    TUE = "TUE"
    WED = "WED"
    THU = "THU"
    FRI = "FRI"
    SAT = "SAT"
    SUN = "SUN"
    PRAZNIK = "PRAZNIK"
