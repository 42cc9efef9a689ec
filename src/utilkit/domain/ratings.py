"""Rating filter."""

from __future__ import annotations

from collections.abc import Iterable

from utilkit.domain.models import RatedItem

DEFAULT_MIN_RATING: float = 4


def filter_by_rating(
    items: Iterable[RatedItem],
    min_rating: float = DEFAULT_MIN_RATING,
) -> list[RatedItem]:
    """Keep the items rated at least *min_rating*, preserving order."""
    return [item for item in items if item.rating >= min_rating]
