"""Weekday enumeration and the weekend/weekday classifier."""

from __future__ import annotations

from enum import Enum, IntEnum

from .errors import InvalidValueError


class Day(IntEnum):
    """Days of the week, ordered Monday (0) through Sunday (6).

    Example:
        >>> Day.MONDAY < Day.SUNDAY
        True
        >>> int(Day.SATURDAY)
        5
    """

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class DayType(str, Enum):
    """Classification of a :class:`Day`.

    Inherits from str so members compare equal to their display text.

    Example:
        >>> DayType.WEEKEND == "Weekend"
        True
    """

    WEEKEND = "Weekend"
    WEEKDAY = "Weekday"


def day_type(day: Day) -> DayType:
    """Return :attr:`DayType.WEEKEND` for Saturday and Sunday, else :attr:`DayType.WEEKDAY`.

    Raises:
        InvalidValueError: If ``day`` is not a :class:`Day` member.

    Example:
        >>> day_type(Day.SATURDAY).value
        'Weekend'
        >>> day_type(Day.MONDAY).value
        'Weekday'
    """
    match day:
        case Day.SATURDAY | Day.SUNDAY:
            return DayType.WEEKEND
        case Day.MONDAY | Day.TUESDAY | Day.WEDNESDAY | Day.THURSDAY | Day.FRIDAY:
            return DayType.WEEKDAY
        case _:
            raise InvalidValueError(f"not a weekday: {day!r}")


def parse_day(name: str) -> Day:
    """Look up a :class:`Day` by case-insensitive name.

    Raises:
        ValueError: If ``name`` names no weekday.

    Example:
        >>> parse_day("saturday")
        <Day.SATURDAY: 5>
    """
    try:
        return Day[name.strip().upper()]
    except KeyError as exc:
        valid = ", ".join(member.name.lower() for member in Day)
        raise ValueError(f"Unknown day {name!r}; expected one of: {valid}") from exc


__all__ = [
    "Day",
    "DayType",
    "day_type",
    "parse_day",
]
