"""Delayed asynchronous square.

The coroutine can be wrapped in an :class:`asyncio.Task` and cancelled
while it sleeps; cancellation propagates as :class:`asyncio.CancelledError`.
"""

from __future__ import annotations

import asyncio
import logging

from utilkit.domain.errors import InvalidInputError

logger = logging.getLogger(__name__)

DEFAULT_SQUARE_DELAY: float = 1.0


async def square_async(n: int | float, *, delay: float = DEFAULT_SQUARE_DELAY) -> int | float:
    """Wait *delay* seconds, then return ``n * n``.

    Raises:
        InvalidInputError: If *n* is negative. Raised before any waiting.
    """
    if n < 0:
        logger.info("Rejected negative input for square: %s", n)
        msg = f"Invalid input: expected a non-negative number, got {n}"
        raise InvalidInputError(msg, value=n)

    logger.debug("Squaring %s after %.3fs delay", n, delay)
    await asyncio.sleep(delay)
    result = n * n
    logger.debug("Square of %s resolved to %s", n, result)
    return result
