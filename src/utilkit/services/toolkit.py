"""ToolkitService — ServiceResult front for the toolkit operations.

Raw inputs (dicts from JSON, strings from the command line) are validated
into domain records here. Domain errors and validation failures become
``INVALID_INPUT`` results; nothing is swallowed.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Iterable, Mapping
from typing import Any, Literal

from pydantic import TypeAdapter, ValidationError

from utilkit.config.logging import bind_operation
from utilkit.domain.compute import square_async
from utilkit.domain.days import get_day_type, parse_weekday
from utilkit.domain.errors import InvalidInputError
from utilkit.domain.models import CarRecord, Product, RatedItem, VehicleRecord
from utilkit.domain.products import get_most_expensive_product
from utilkit.domain.ratings import filter_by_rating
from utilkit.domain.text import concatenate_arrays, format_string
from utilkit.domain.types import Weekday
from utilkit.domain.values import TextValue, coerce_value, parse_number, process_value
from utilkit.domain.vehicles import describe_car, describe_vehicle
from utilkit.services.base import BaseService
from utilkit.services.result import ServiceResult, invalid_input

logger = logging.getLogger(__name__)

ValueKind = Literal["auto", "text", "number"]

_RATED_ITEMS = TypeAdapter(list[RatedItem])
_PRODUCTS = TypeAdapter(list[Product])


def _validation_detail(exc: ValidationError) -> dict[str, Any]:
    return {
        "errors": [
            {"loc": ".".join(str(p) for p in err["loc"]), "msg": err["msg"]}
            for err in exc.errors()
        ]
    }


class ToolkitService(BaseService):
    """Runs toolkit operations and reports them as ServiceResult."""

    # ------------------------------------------------------------------
    # Text and sequences
    # ------------------------------------------------------------------

    def format_string(self, text: str, *, to_upper: bool = False) -> ServiceResult:
        return ServiceResult(
            ok=True,
            op="format_string",
            data={"input": text, "output": format_string(text, to_upper), "upper": to_upper},
        )

    def concatenate(self, arrays: Iterable[Iterable[Any]]) -> ServiceResult:
        items = concatenate_arrays(*arrays)
        return ServiceResult(
            ok=True,
            op="concatenate_arrays",
            data={"items": items, "count": len(items)},
        )

    # ------------------------------------------------------------------
    # Records
    # ------------------------------------------------------------------

    def filter_by_rating(
        self,
        raw_items: Iterable[Mapping[str, Any] | RatedItem],
        *,
        min_rating: float | None = None,
    ) -> ServiceResult:
        """Keep items rated at least *min_rating* (default from ``[ratings]``)."""
        op = "filter_by_rating"
        try:
            items = _RATED_ITEMS.validate_python(list(raw_items))
        except ValidationError as exc:
            return invalid_input(op, "Malformed rated item", **_validation_detail(exc))

        threshold = self._settings.ratings.min_rating if min_rating is None else min_rating
        with bind_operation(op):
            kept = filter_by_rating(items, threshold)
            logger.debug("Kept %d of %d items at rating >= %s", len(kept), len(items), threshold)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "items": [item.model_dump() for item in kept],
                "count": len(kept),
                "dropped": len(items) - len(kept),
                "min_rating": threshold,
            },
        )

    def most_expensive(
        self,
        raw_products: Iterable[Mapping[str, Any] | Product],
    ) -> ServiceResult:
        """Select the highest-priced product. Empty input is not an error."""
        op = "most_expensive_product"
        try:
            products = _PRODUCTS.validate_python(list(raw_products))
        except ValidationError as exc:
            return invalid_input(op, "Malformed product", **_validation_detail(exc))

        product = get_most_expensive_product(products)
        warnings = [] if product is not None else ["No products given"]
        return ServiceResult(
            ok=True,
            op=op,
            data={"product": product.model_dump() if product else None},
            warnings=warnings,
        )

    def describe(self, make: str, year: int, *, model: str | None = None) -> ServiceResult:
        """Describe a vehicle and, when *model* is given, the car as well."""
        op = "describe"
        try:
            if model is None:
                car = None
                vehicle = VehicleRecord(make=make, year=year)
            else:
                car = CarRecord.build(make, year, model)
                vehicle = car.vehicle
        except ValidationError as exc:
            return invalid_input(op, "Malformed vehicle record", **_validation_detail(exc))

        # Both descriptions come from the same record and coexist.
        data: dict[str, Any] = {"vehicle": describe_vehicle(vehicle)}
        if car is not None:
            data["car"] = describe_car(car)
        return ServiceResult(ok=True, op=op, data=data)

    # ------------------------------------------------------------------
    # Values and days
    # ------------------------------------------------------------------

    def process_value(self, raw: str | int | float, *, kind: ValueKind = "auto") -> ServiceResult:
        """Process *raw* as text or number.

        ``auto`` treats numeric-looking strings as numbers; ``text`` and
        ``number`` force the variant.
        """
        op = "process_value"
        try:
            if kind == "text":
                value = TextValue(value=str(raw))
            elif isinstance(raw, str) and kind == "number":
                value = coerce_value(parse_number(raw))
            elif isinstance(raw, str):
                try:
                    value = coerce_value(parse_number(raw))
                except InvalidInputError:
                    value = TextValue(value=raw)
            else:
                value = coerce_value(raw)
        except InvalidInputError as exc:
            return invalid_input(op, str(exc), value=repr(exc.value))

        return ServiceResult(
            ok=True,
            op=op,
            data={"kind": value.kind, "value": value.value, "result": process_value(value)},
        )

    def day_type(self, day: str | Weekday) -> ServiceResult:
        op = "day_type"
        try:
            weekday = day if isinstance(day, Weekday) else parse_weekday(day)
        except InvalidInputError as exc:
            return invalid_input(op, str(exc), value=day)
        return ServiceResult(
            ok=True,
            op=op,
            data={"day": weekday.name.title(), "day_type": str(get_day_type(weekday))},
        )

    # ------------------------------------------------------------------
    # Delayed square
    # ------------------------------------------------------------------

    async def asquare(self, n: int | float, *, delay: float | None = None) -> ServiceResult:
        """Await the delayed square; usable from a running event loop."""
        op = "square"
        wait = self._settings.square.delay_seconds if delay is None else delay
        start = time.perf_counter()
        try:
            with bind_operation(op):
                result = await square_async(n, delay=wait)
        except InvalidInputError as exc:
            return invalid_input(op, str(exc), value=n)
        elapsed_ms = round((time.perf_counter() - start) * 1000, 2)
        return ServiceResult(
            ok=True,
            op=op,
            data={"input": n, "result": result, "delay_seconds": wait},
            meta={"elapsed_ms": elapsed_ms},
        )

    def square(self, n: int | float, *, delay: float | None = None) -> ServiceResult:
        """Run :meth:`asquare` to completion on a fresh event loop."""
        return asyncio.run(self.asquare(n, delay=delay))
