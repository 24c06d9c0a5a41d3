"""Text-or-number sizing stories."""

from __future__ import annotations

from typing import Any

import pytest

from snipkit.domain.errors import InvalidValueError
from snipkit.domain.values import NumberValue, TextValue, process_value, size_of, tag_value


@pytest.mark.os_agnostic
def test_process_value_counts_text_characters() -> None:
    assert process_value(TextValue("hello")) == 5


@pytest.mark.os_agnostic
def test_process_value_doubles_numbers() -> None:
    assert process_value(NumberValue(10)) == 20


@pytest.mark.os_agnostic
def test_process_value_doubles_floats() -> None:
    assert process_value(NumberValue(2.5)) == 5.0


@pytest.mark.os_agnostic
def test_process_value_empty_text_has_size_zero() -> None:
    assert process_value(TextValue("")) == 0


@pytest.mark.os_agnostic
def test_process_value_rejects_values_outside_the_sum_type() -> None:
    with pytest.raises(InvalidValueError, match="unsupported value type: str"):
        process_value("hello")  # type: ignore[arg-type]


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("hello", 5),
        ("", 0),
        (10, 20),
        (-3, -6),
        (1.5, 3.0),
    ],
)
def test_size_of_dispatches_on_raw_type(raw: str | float, expected: float) -> None:
    assert size_of(raw) == expected


@pytest.mark.os_agnostic
def test_size_of_numeric_text_is_still_text() -> None:
    """A digit string is text: its length, not its double."""
    assert size_of("10") == 2


@pytest.mark.os_agnostic
@pytest.mark.parametrize("raw", [True, None, [1, 2], {"a": 1}, b"bytes"])
def test_size_of_rejects_other_types(raw: Any) -> None:
    with pytest.raises(InvalidValueError):
        size_of(raw)


@pytest.mark.os_agnostic
def test_tag_value_wraps_each_variant() -> None:
    assert tag_value("x") == TextValue("x")
    assert tag_value(7) == NumberValue(7)


@pytest.mark.os_agnostic
def test_invalid_value_error_is_type_error() -> None:
    with pytest.raises(TypeError):
        size_of(False)
