"""Application layer - use cases and port definitions.

Contains use cases that orchestrate domain logic and port protocols that
define the interfaces for adapter implementations.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
    * :mod:`.showcase` - Run every domain utility on sample inputs
"""

from __future__ import annotations

from .ports import DisplayConfig, GetConfig, InitLogging
from .showcase import SAMPLE_ITEMS, ShowcaseEntry, run_showcase

__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "SAMPLE_ITEMS",
    "ShowcaseEntry",
    "run_showcase",
]
