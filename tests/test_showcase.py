"""Showcase use case: one rendered entry per utility."""

from __future__ import annotations

import asyncio

import pytest

from snipkit.application.showcase import SAMPLE_ITEMS, ShowcaseEntry, run_showcase
from snipkit.domain import deferred


@pytest.fixture
def instant_sleep(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    delays: list[float] = []
    real_sleep = asyncio.sleep

    async def _fake_sleep(delay: float) -> None:
        delays.append(delay)
        await real_sleep(0)

    monkeypatch.setattr(deferred.asyncio, "sleep", _fake_sleep)
    return delays


@pytest.mark.os_agnostic
def test_sample_items_mix_ratings_around_threshold() -> None:
    assert [item.rating for item in SAMPLE_ITEMS] == [5, 3, 4]


@pytest.mark.os_agnostic
@pytest.mark.asyncio
async def test_showcase_without_squares_renders_sync_utilities() -> None:
    entries = await run_showcase(square_inputs=())

    assert {entry.label: entry.result for entry in entries} == {
        'format_case("Hello")': "HELLO",
        'format_case("Hello", False)': "hello",
        "filter_by_rating(sample items)": "Dune, Emma",
        "concatenate([1, 2], [3], [])": "[1, 2, 3]",
        "car.describe()": "Make: Toyota, Year: 2020, Model: Corolla",
        'size_of("hello")': "5",
        "size_of(10)": "20",
        "most_expensive(sample products)": "Bag",
        "day_type(SATURDAY)": "Weekend",
        "day_type(MONDAY)": "Weekday",
    }


@pytest.mark.os_agnostic
@pytest.mark.asyncio
async def test_showcase_squares_report_results_and_errors(instant_sleep: list[float]) -> None:
    entries = await run_showcase()

    assert entries[-2:] == [
        ShowcaseEntry("square_async(5)", "25"),
        ShowcaseEntry("square_async(-1)", "error: Negative number not allowed"),
    ]
    assert instant_sleep == [1.0]


@pytest.mark.os_agnostic
@pytest.mark.asyncio
async def test_showcase_runs_squares_concurrently() -> None:
    """Three real squares finish in about one delay, not three."""
    loop = asyncio.get_running_loop()
    started = loop.time()

    entries = await run_showcase(square_inputs=(1, 2, 3))

    assert [entry.result for entry in entries[-3:]] == ["1", "4", "9"]
    assert loop.time() - started < 2.5
