"""In-memory adapters wired by :func:`snipkit.composition.build_testing`.

Contents:
    * :mod:`.config` - Empty configuration and a silent display
    * :mod:`.logging` - Logging initialisation that does nothing
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import display_config_in_memory, get_config_in_memory
from .logging import init_logging_in_memory

if TYPE_CHECKING:
    from snipkit.application.ports import DisplayConfig, GetConfig, InitLogging

    _get_config_port: GetConfig = get_config_in_memory
    _display_config_port: DisplayConfig = display_config_in_memory
    _init_logging_port: InitLogging = init_logging_in_memory

__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
