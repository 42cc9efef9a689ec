"""String casing and sequence concatenation helpers."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import chain
from typing import TypeVar

T = TypeVar("T")


def format_string(text: str, to_upper: bool = False) -> str:
    """Return *text* uppercased when *to_upper* is true, else lowercased.

    Examples:
        >>> format_string("Hello", True)
        'HELLO'
        >>> format_string("Hello")
        'hello'
    """
    return text.upper() if to_upper else text.lower()


def concatenate_arrays(*arrays: Iterable[T]) -> list[T]:
    """Flatten the given sequences one level, in argument order.

    Examples:
        >>> concatenate_arrays([1, 2], [3], [4, 5])
        [1, 2, 3, 4, 5]
        >>> concatenate_arrays()
        []
    """
    return list(chain.from_iterable(arrays))
