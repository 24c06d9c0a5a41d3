"""Rendering choices for ``snipkit config``."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """How the merged configuration is printed.

    ``HUMAN`` is TOML-like with provenance comments, ``JSON`` is for scripts.
    Members compare equal to their value, so they double as Click choices.

    Example:
        >>> OutputFormat("json") is OutputFormat.JSON
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = ["OutputFormat"]
