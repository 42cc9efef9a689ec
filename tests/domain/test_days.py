"""Tests for weekday classification."""

import pytest

from utilkit.domain.days import get_day_type, parse_weekday
from utilkit.domain.errors import InvalidInputError
from utilkit.domain.types import DayType, Weekday


class TestGetDayType:
    def test_saturday_is_weekend(self) -> None:
        assert get_day_type(Weekday.SATURDAY) == "Weekend"

    def test_wednesday_is_weekday(self) -> None:
        assert get_day_type(Weekday.WEDNESDAY) == "Weekday"

    @pytest.mark.parametrize(
        ("day", "expected"),
        [(d, DayType.WEEKEND if d in (Weekday.SATURDAY, Weekday.SUNDAY) else DayType.WEEKDAY)
         for d in Weekday],
        ids=[d.name for d in Weekday],
    )
    def test_total_over_all_days(self, day: Weekday, expected: DayType) -> None:
        assert get_day_type(day) is expected


class TestParseWeekday:
    @pytest.mark.parametrize("name", ["saturday", "Saturday", "  SATURDAY "])
    def test_case_insensitive(self, name: str) -> None:
        assert parse_weekday(name) is Weekday.SATURDAY

    @pytest.mark.parametrize("name", ["sat", "", "Funday"])
    def test_unknown_rejected(self, name: str) -> None:
        with pytest.raises(InvalidInputError, match="Unknown weekday"):
            parse_weekday(name)
