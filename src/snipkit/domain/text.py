"""Case conversion for plain strings."""

from __future__ import annotations


def format_case(text: str, to_upper: bool | None = True) -> str:
    """Return ``text`` upper-cased, or lower-cased when ``to_upper`` is ``False``.

    Only an explicit ``False`` selects lower case; ``None`` means the caller
    left the choice unspecified and behaves like ``True``.

    Args:
        text: Input string.
        to_upper: Case selector. Defaults to ``True``.

    Returns:
        The case-converted string.

    Example:
        >>> format_case("Hello")
        'HELLO'
        >>> format_case("Hello", None)
        'HELLO'
        >>> format_case("Hello", False)
        'hello'
    """
    if to_upper is not False:
        return text.upper()
    return text.lower()


__all__ = ["format_case"]
