"""Single-shot asynchronous square computation."""

from __future__ import annotations

import asyncio
from typing import Final

from .errors import NegativeValueError

#: Fixed delay before :func:`square_async` resolves (1000 ms).
SQUARE_DELAY_SECONDS: Final[float] = 1.0


async def square_async(n: float) -> float:
    """Return ``n * n`` after :data:`SQUARE_DELAY_SECONDS`.

    Non-positive input fails immediately without waiting. The failure is
    raised inside the coroutine, so it surfaces only when the caller awaits
    the result.

    Args:
        n: Number to square; must be greater than zero.

    Returns:
        The square of ``n``.

    Raises:
        NegativeValueError: If ``n <= 0``.

    Example:
        >>> asyncio.run(square_async(5))  # doctest: +SKIP
        25
    """
    if not n > 0:
        raise NegativeValueError()
    await asyncio.sleep(SQUARE_DELAY_SECONDS)
    return n * n


__all__ = [
    "SQUARE_DELAY_SECONDS",
    "square_async",
]
