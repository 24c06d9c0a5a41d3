"""Variadic concatenation of homogeneous sequences."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def concatenate(*sequences: Iterable[T]) -> list[T]:
    """Join any number of sequences into a new list.

    Elements keep their order within each argument and arguments are
    consumed left to right. Inputs are left untouched.

    Example:
        >>> concatenate([1, 2], [3], [])
        [1, 2, 3]
        >>> concatenate()
        []
    """
    joined: list[T] = []
    for sequence in sequences:
        joined.extend(sequence)
    return joined


__all__ = ["concatenate"]
