"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

NEGATIVE_NUMBER_MESSAGE = "Negative number not allowed"


class NegativeValueError(ValueError):
    """Non-positive input handed to the delayed square computation.

    The only intentional failure path in the library. The message is fixed
    so callers can surface it unchanged.

    Example:
        >>> from snipkit.domain.errors import NegativeValueError
        >>> err = NegativeValueError()
        >>> str(err)
        'Negative number not allowed'
        >>> isinstance(err, ValueError)
        True
    """

    def __init__(self, message: str = NEGATIVE_NUMBER_MESSAGE) -> None:
        super().__init__(message)


class InvalidValueError(TypeError):
    """Value outside a closed input domain.

    Raised when a caller hands a value that is neither variant of a closed
    sum type, or a weekday that is not a :class:`~snipkit.domain.days.Day`.
    This is a contract violation, not a recoverable condition.

    Example:
        >>> from snipkit.domain.errors import InvalidValueError
        >>> err = InvalidValueError("unsupported value type: list")
        >>> str(err)
        'unsupported value type: list'
        >>> isinstance(err, TypeError)
        True
    """


__all__ = [
    "NEGATIVE_NUMBER_MESSAGE",
    "InvalidValueError",
    "NegativeValueError",
]
