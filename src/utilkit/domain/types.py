"""Calendar enums.

``Weekday`` is ordered by ordinal so days can be bucketed by comparison.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Weekday(IntEnum):
    """The seven days of the week, Monday first."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class DayType(StrEnum):
    """Weekday/weekend classification."""

    WEEKDAY = "Weekday"
    WEEKEND = "Weekend"
