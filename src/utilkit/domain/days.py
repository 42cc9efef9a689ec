"""Day classification."""

from __future__ import annotations

from utilkit.domain.errors import InvalidInputError
from utilkit.domain.types import DayType, Weekday


def get_day_type(day: Weekday) -> DayType:
    """Classify *day* as a weekend day (Saturday onward) or a weekday.

    Examples:
        >>> get_day_type(Weekday.SATURDAY)
        <DayType.WEEKEND: 'Weekend'>
        >>> get_day_type(Weekday.WEDNESDAY)
        <DayType.WEEKDAY: 'Weekday'>
    """
    return DayType.WEEKEND if day >= Weekday.SATURDAY else DayType.WEEKDAY


def parse_weekday(name: str) -> Weekday:
    """Look up a weekday by its full name, ignoring case and surrounding space."""
    try:
        return Weekday[name.strip().upper()]
    except KeyError:
        valid = ", ".join(d.name.title() for d in Weekday)
        msg = f"Unknown weekday {name!r}. Expected one of: {valid}"
        raise InvalidInputError(msg, value=name) from None
