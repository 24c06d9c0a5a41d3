"""Showcase use case - run every domain utility on fixed sample inputs.

Produces one :class:`ShowcaseEntry` per utility so adapters can render the
results without knowing which domain functions exist.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from ..domain.days import Day, day_type
from ..domain.deferred import square_async
from ..domain.errors import NegativeValueError
from ..domain.products import SAMPLE_PRODUCTS, most_expensive
from ..domain.ratings import Item, filter_by_rating
from ..domain.sequences import concatenate
from ..domain.text import format_case
from ..domain.values import size_of
from ..domain.vehicles import Car

SAMPLE_ITEMS: tuple[Item, ...] = (
    Item("Dune", 5),
    Item("Eragon", 3),
    Item("Emma", 4),
)


@dataclass(frozen=True, slots=True)
class ShowcaseEntry:
    """Label and rendered result of one utility run."""

    label: str
    result: str


async def _square_outcome(n: float) -> str:
    try:
        return str(await square_async(n))
    except NegativeValueError as exc:
        return f"error: {exc}"


async def run_showcase(square_inputs: tuple[float, ...] = (5, -1)) -> list[ShowcaseEntry]:
    """Run each utility once and collect the rendered results.

    The square computations for ``square_inputs`` run concurrently, so the
    whole showcase waits for a single delay.

    Example:
        >>> entries = asyncio.run(run_showcase(square_inputs=()))
        >>> entries[0]
        ShowcaseEntry(label='format_case("Hello")', result='HELLO')
    """
    car = Car.build("Toyota", 2020, "Corolla")
    top = most_expensive(SAMPLE_PRODUCTS)
    entries = [
        ShowcaseEntry('format_case("Hello")', format_case("Hello")),
        ShowcaseEntry('format_case("Hello", False)', format_case("Hello", False)),
        ShowcaseEntry(
            "filter_by_rating(sample items)",
            ", ".join(item.title for item in filter_by_rating(SAMPLE_ITEMS)),
        ),
        ShowcaseEntry("concatenate([1, 2], [3], [])", str(concatenate([1, 2], [3], []))),
        ShowcaseEntry("car.describe()", car.describe()),
        ShowcaseEntry('size_of("hello")', str(size_of("hello"))),
        ShowcaseEntry("size_of(10)", str(size_of(10))),
        ShowcaseEntry("most_expensive(sample products)", top.name if top else "none"),
        ShowcaseEntry("day_type(SATURDAY)", day_type(Day.SATURDAY).value),
        ShowcaseEntry("day_type(MONDAY)", day_type(Day.MONDAY).value),
    ]
    outcomes = await asyncio.gather(*(_square_outcome(n) for n in square_inputs))
    entries.extend(ShowcaseEntry(f"square_async({n:g})", outcome) for n, outcome in zip(square_inputs, outcomes))
    return entries


__all__ = [
    "SAMPLE_ITEMS",
    "ShowcaseEntry",
    "run_showcase",
]
