"""Text/number tagged union and the value processor.

The variant is chosen once, at the edge, by :func:`coerce_value`. The
processor itself only reads the ``kind`` tag.
"""

from __future__ import annotations

import math
import re
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from utilkit.domain.errors import InvalidInputError


class TextValue(BaseModel):
    """Text variant."""

    model_config = {"frozen": True}

    kind: Literal["text"] = "text"
    value: str


class NumberValue(BaseModel):
    """Numeric variant."""

    model_config = {"frozen": True}

    kind: Literal["number"] = "number"
    value: int | float


Value = Annotated[TextValue | NumberValue, Field(discriminator="kind")]

_DECIMAL = re.compile(r"[+-]?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?")


def process_value(value: Value) -> int | float:
    """Return the length of a text value, or double a numeric value.

    Examples:
        >>> process_value(TextValue(value="hello"))
        5
        >>> process_value(NumberValue(value=10))
        20
    """
    if value.kind == "text":
        return len(value.value)
    return value.value * 2


def coerce_value(raw: str | int | float) -> TextValue | NumberValue:
    """Wrap a plain Python value in the matching variant.

    Booleans are rejected even though ``bool`` subclasses ``int``.
    """
    if isinstance(raw, bool):
        msg = f"Expected text or number, got bool: {raw!r}"
        raise InvalidInputError(msg, value=raw)
    if isinstance(raw, str):
        return TextValue(value=raw)
    if isinstance(raw, (int, float)):
        return NumberValue(value=raw)
    msg = f"Expected text or number, got {type(raw).__name__}"
    raise InvalidInputError(msg, value=raw)


def parse_number(text: str) -> int | float:
    """Parse a plain decimal literal, keeping integers exact.

    Only digits with an optional sign, fraction, and exponent are accepted.
    Words such as ``nan`` or ``inf``, underscores, and surrounding space
    are not numbers here.

    Examples:
        >>> parse_number("9007199254740993")
        9007199254740993
        >>> parse_number("2.5e1")
        25.0
    """
    if not _DECIMAL.fullmatch(text):
        msg = f"Not a number: {text!r}"
        raise InvalidInputError(msg, value=text)
    if "." not in text and "e" not in text and "E" not in text:
        try:
            return int(text)
        except ValueError as exc:
            # Beyond the interpreter's int string-conversion limit.
            raise InvalidInputError(str(exc), value=text) from exc
    number = float(text)
    if not math.isfinite(number):
        msg = f"Number out of range: {text!r}"
        raise InvalidInputError(msg, value=text)
    return number
