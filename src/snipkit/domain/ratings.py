"""Rated items and the minimum-rating filter."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

#: Lowest rating an item may carry and still pass :func:`filter_by_rating`.
MIN_RATING: Final[int] = 4


@dataclass(frozen=True, slots=True)
class Item:
    """A titled item carrying a numeric rating."""

    title: str
    rating: float


def filter_by_rating(items: Iterable[Item]) -> list[Item]:
    """Return the items rated at least :data:`MIN_RATING`, in input order.

    Example:
        >>> filter_by_rating([Item("a", 5), Item("b", 3)])
        [Item(title='a', rating=5)]
        >>> filter_by_rating([])
        []
    """
    return [item for item in items if item.rating >= MIN_RATING]


__all__ = [
    "MIN_RATING",
    "Item",
    "filter_by_rating",
]
