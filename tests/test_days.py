"""Weekday classification stories."""

from __future__ import annotations

import pytest

from snipkit.domain.days import Day, DayType, day_type, parse_day
from snipkit.domain.errors import InvalidValueError

WEEKEND = {Day.SATURDAY, Day.SUNDAY}


@pytest.mark.os_agnostic
def test_saturday_is_weekend() -> None:
    assert day_type(Day.SATURDAY) == "Weekend"


@pytest.mark.os_agnostic
def test_monday_is_weekday() -> None:
    assert day_type(Day.MONDAY) == "Weekday"


@pytest.mark.os_agnostic
@pytest.mark.parametrize("day", list(Day))
def test_day_type_is_weekend_exactly_for_saturday_and_sunday(day: Day) -> None:
    expected = DayType.WEEKEND if day in WEEKEND else DayType.WEEKDAY

    assert day_type(day) is expected


@pytest.mark.os_agnostic
def test_day_enumeration_is_closed_and_ordered() -> None:
    assert len(Day) == 7
    assert [int(day) for day in Day] == list(range(7))
    assert Day.MONDAY < Day.SUNDAY


@pytest.mark.os_agnostic
def test_day_type_rejects_values_outside_the_enumeration() -> None:
    with pytest.raises(InvalidValueError, match="not a weekday"):
        day_type(7)  # type: ignore[arg-type]


@pytest.mark.os_agnostic
@pytest.mark.parametrize(("name", "expected"), [("saturday", Day.SATURDAY), ("  Monday ", Day.MONDAY), ("SUNDAY", Day.SUNDAY)])
def test_parse_day_is_case_insensitive(name: str, expected: Day) -> None:
    assert parse_day(name) is expected


@pytest.mark.os_agnostic
def test_parse_day_rejects_unknown_names() -> None:
    with pytest.raises(ValueError, match="Unknown day 'funday'"):
        parse_day("funday")
