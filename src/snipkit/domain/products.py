"""Priced products and the most-expensive fold."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import reduce
from typing import Final


@dataclass(frozen=True, slots=True)
class Product:
    """A named product with a price."""

    name: str
    price: float


#: Fixed sample catalogue.
SAMPLE_PRODUCTS: Final[tuple[Product, ...]] = (
    Product("Pen", 10),
    Product("Notebook", 25),
    Product("Bag", 50),
)


def _pricier(current: Product, candidate: Product) -> Product:
    # strict comparison: on equal prices the earlier product stays
    return candidate if candidate.price > current.price else current


def most_expensive(products: Iterable[Product]) -> Product | None:
    """Return the highest-priced product, or ``None`` for an empty input.

    Ties go to the product seen first.

    Example:
        >>> most_expensive(SAMPLE_PRODUCTS)
        Product(name='Bag', price=50)
        >>> most_expensive([]) is None
        True
    """
    iterator = iter(products)
    first = next(iterator, None)
    if first is None:
        return None
    return reduce(_pricier, iterator, first)


__all__ = [
    "SAMPLE_PRODUCTS",
    "Product",
    "most_expensive",
]
