"""Size of a text-or-number value.

:data:`Value` is a closed sum type with two variants. :func:`process_value`
matches on the variant; :func:`size_of` is the boundary helper that tags raw
Python values before dispatching.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NoReturn, TypeAlias

from .errors import InvalidValueError


@dataclass(frozen=True, slots=True)
class TextValue:
    """Text variant; sized by its character count."""

    text: str


@dataclass(frozen=True, slots=True)
class NumberValue:
    """Numeric variant; sized by doubling."""

    number: float


Value: TypeAlias = TextValue | NumberValue


def _unreachable(value: NoReturn) -> NoReturn:
    raise InvalidValueError(f"unsupported value type: {type(value).__name__}")


def process_value(value: Value) -> float:
    """Return the character count of a text value or twice a numeric value.

    Args:
        value: One of the two :data:`Value` variants.

    Returns:
        ``len(text)`` for :class:`TextValue`, ``number * 2`` for :class:`NumberValue`.

    Raises:
        InvalidValueError: If ``value`` is not a :data:`Value` variant.

    Example:
        >>> process_value(TextValue("hello"))
        5
        >>> process_value(NumberValue(10))
        20
    """
    match value:
        case TextValue(text=text):
            return len(text)
        case NumberValue(number=number):
            return number * 2
        case _:
            _unreachable(value)


def tag_value(raw: str | int | float) -> Value:
    """Wrap a raw ``str`` or number in its :data:`Value` variant.

    ``bool`` is rejected even though it subclasses ``int``.

    Raises:
        InvalidValueError: For any other type.
    """
    if isinstance(raw, str):
        return TextValue(raw)
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return NumberValue(raw)
    raise InvalidValueError(f"unsupported value type: {type(raw).__name__}")


def size_of(raw: str | int | float) -> float:
    """Tag ``raw`` and return its size.

    Example:
        >>> size_of("hello")
        5
        >>> size_of(10)
        20
        >>> size_of(True)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidValueError: unsupported value type: bool
    """
    return process_value(tag_value(raw))


__all__ = [
    "NumberValue",
    "TextValue",
    "Value",
    "process_value",
    "size_of",
    "tag_value",
]
