"""Product selection."""

from __future__ import annotations

from collections.abc import Iterable
from operator import attrgetter

from utilkit.domain.models import Product


def get_most_expensive_product(products: Iterable[Product]) -> Product | None:
    """Return the highest-priced product, or None for an empty input.

    Ties go to the first product with the maximum price.
    """
    return max(products, key=attrgetter("price"), default=None)
