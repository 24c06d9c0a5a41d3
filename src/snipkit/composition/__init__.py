"""Composition root: picks the adapters each entry point runs with.

``build_production`` is what the console script uses; ``build_testing``
swaps in the in-memory adapters so CLI tests touch neither the filesystem
nor the lib_log_rich runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from ..application.ports import DisplayConfig, GetConfig, InitLogging

    # pyright checks each adapter against its port here.
    _get_config_port: GetConfig = get_config
    _display_config_port: DisplayConfig = display_config
    _init_logging_port: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """The adapter functions one CLI run is wired with."""

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging


def build_production() -> AppServices:
    return AppServices(get_config=get_config, display_config=display_config, init_logging=init_logging)


def build_testing() -> AppServices:
    from ..adapters.memory import display_config_in_memory, get_config_in_memory, init_logging_in_memory

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "display_config",
    "get_config",
    "init_logging",
]
