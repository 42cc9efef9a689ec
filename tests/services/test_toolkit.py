"""Tests for ToolkitService."""

from __future__ import annotations

import asyncio
import time
from pathlib import Path

import pytest

from utilkit.config.settings import UtilSettings
from utilkit.domain.models import Product
from utilkit.domain.types import Weekday
from utilkit.services.toolkit import ToolkitService


class TestTextOps:
    def test_format_upper(self, toolkit: ToolkitService) -> None:
        result = toolkit.format_string("Hello", to_upper=True)
        assert result.ok
        assert result.op == "format_string"
        assert result.data["output"] == "HELLO"

    def test_format_default_lower(self, toolkit: ToolkitService) -> None:
        assert toolkit.format_string("Hello").data["output"] == "hello"

    def test_concatenate(self, toolkit: ToolkitService) -> None:
        result = toolkit.concatenate([[1, 2], [3], [4, 5]])
        assert result.data == {"items": [1, 2, 3, 4, 5], "count": 5}

    def test_concatenate_nothing(self, toolkit: ToolkitService) -> None:
        assert toolkit.concatenate([]).data["items"] == []


class TestFilterByRating:
    def test_filters_dicts(self, toolkit: ToolkitService) -> None:
        result = toolkit.filter_by_rating(
            [{"title": "a", "rating": 5}, {"title": "b", "rating": 3}, {"title": "c", "rating": 4}]
        )
        assert result.ok
        assert [i["title"] for i in result.data["items"]] == ["a", "c"]
        assert result.data["dropped"] == 1
        assert result.data["min_rating"] == 4

    def test_explicit_threshold(self, toolkit: ToolkitService) -> None:
        result = toolkit.filter_by_rating([{"title": "a", "rating": 3}], min_rating=3)
        assert result.data["count"] == 1

    def test_threshold_from_config(self, tmp_path: Path) -> None:
        (tmp_path / "utilkit.toml").write_text("[ratings]\nmin_rating = 2\n")
        svc = ToolkitService(UtilSettings.from_cli(start=tmp_path))
        result = svc.filter_by_rating([{"title": "a", "rating": 2.5}])
        assert result.data["count"] == 1

    def test_malformed_item(self, toolkit: ToolkitService) -> None:
        result = toolkit.filter_by_rating([{"title": "a"}])
        assert result.ok is False
        assert result.error.code == "INVALID_INPUT"
        assert result.error.detail["errors"][0]["loc"] == "0.rating"


class TestMostExpensive:
    def test_picks_max(self, toolkit: ToolkitService) -> None:
        result = toolkit.most_expensive(
            [{"name": "A", "price": 10}, Product(name="B", price=20)]
        )
        assert result.data["product"] == {"name": "B", "price": 20}
        assert result.warnings == []

    def test_empty_warns_but_succeeds(self, toolkit: ToolkitService) -> None:
        result = toolkit.most_expensive([])
        assert result.ok
        assert result.data["product"] is None
        assert result.warnings == ["No products given"]

    def test_malformed(self, toolkit: ToolkitService) -> None:
        result = toolkit.most_expensive([{"name": "A", "price": "lots"}])
        assert result.ok is False


class TestDescribe:
    def test_vehicle_only(self, toolkit: ToolkitService) -> None:
        result = toolkit.describe("Toyota", 2020)
        assert result.data == {"vehicle": "Make: Toyota, Year: 2020"}

    def test_with_model(self, toolkit: ToolkitService) -> None:
        result = toolkit.describe("Toyota", 2020, model="Corolla")
        assert result.data == {"vehicle": "Make: Toyota, Year: 2020", "car": "Model: Corolla"}


class TestProcessValue:
    @pytest.mark.parametrize(
        ("raw", "kind", "expected_kind", "expected"),
        [
            ("hello", "auto", "text", 5),
            ("10", "auto", "number", 20),
            ("2.5", "auto", "number", 5.0),
            ("10", "text", "text", 2),
            ("-3", "number", "number", -6),
            (10, "auto", "number", 20),
        ],
    )
    def test_variants(
        self,
        toolkit: ToolkitService,
        raw: str | int,
        kind: str,
        expected_kind: str,
        expected: float,
    ) -> None:
        result = toolkit.process_value(raw, kind=kind)  # type: ignore[arg-type]
        assert result.ok
        assert result.data["kind"] == expected_kind
        assert result.data["result"] == expected

    def test_forced_number_rejects_text(self, toolkit: ToolkitService) -> None:
        result = toolkit.process_value("abc", kind="number")
        assert result.ok is False
        assert result.error.code == "INVALID_INPUT"
        assert "Not a number" in result.error.message

    def test_bool_rejected(self, toolkit: ToolkitService) -> None:
        result = toolkit.process_value(True)
        assert result.ok is False

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("nan", 3), ("Infinity", 8), ("inf", 3), ("1_000", 5), (" 10 ", 4)],
    )
    def test_auto_keeps_non_decimal_words_as_text(
        self, toolkit: ToolkitService, raw: str, expected: int
    ) -> None:
        result = toolkit.process_value(raw)
        assert result.data == {"kind": "text", "value": raw, "result": expected}

    def test_forced_number_rejects_nan(self, toolkit: ToolkitService) -> None:
        result = toolkit.process_value("nan", kind="number")
        assert result.ok is False
        assert result.error.code == "INVALID_INPUT"

    def test_large_integer_stays_exact(self, toolkit: ToolkitService) -> None:
        result = toolkit.process_value("9007199254740993")
        assert result.data["result"] == 2 * 9007199254740993


class TestDayType:
    def test_by_name(self, toolkit: ToolkitService) -> None:
        result = toolkit.day_type("saturday")
        assert result.data == {"day": "Saturday", "day_type": "Weekend"}

    def test_by_enum(self, toolkit: ToolkitService) -> None:
        assert toolkit.day_type(Weekday.WEDNESDAY).data["day_type"] == "Weekday"

    def test_unknown_day(self, toolkit: ToolkitService) -> None:
        result = toolkit.day_type("Caturday")
        assert result.ok is False
        assert result.error.detail == {"value": "Caturday"}


class TestSquare:
    def test_square(self, toolkit: ToolkitService) -> None:
        result = toolkit.square(5)
        assert result.ok
        assert result.data == {"input": 5, "result": 25, "delay_seconds": 0.0}
        assert "elapsed_ms" in result.meta

    def test_delay_override(self, toolkit: ToolkitService) -> None:
        result = toolkit.square(2, delay=0.01)
        assert result.data["delay_seconds"] == 0.01
        assert result.meta["elapsed_ms"] >= 9

    def test_negative_fails_fast(self, settings: UtilSettings) -> None:
        # Default delay is one second; a rejection must not wait for it.
        svc = ToolkitService(settings)
        start = time.perf_counter()
        result = svc.square(-1)
        assert time.perf_counter() - start < 0.5
        assert result.ok is False
        assert result.error.code == "INVALID_INPUT"
        assert "Invalid input" in result.error.message

    def test_asquare_inside_running_loop(self, toolkit: ToolkitService) -> None:
        async def run() -> list[int]:
            results = await asyncio.gather(toolkit.asquare(3), toolkit.asquare(4))
            return [r.data["result"] for r in results]

        assert asyncio.run(run()) == [9, 16]
