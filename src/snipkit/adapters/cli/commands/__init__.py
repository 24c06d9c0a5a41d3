"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Metadata command from :mod:`.info`
    * Configuration command from :mod:`.config`
    * Domain utility commands from :mod:`.snippets`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .snippets import (
    cli_case,
    cli_day,
    cli_most_expensive,
    cli_showcase,
    cli_size,
    cli_square,
)

__all__ = [
    "cli_case",
    "cli_config",
    "cli_day",
    "cli_info",
    "cli_most_expensive",
    "cli_showcase",
    "cli_size",
    "cli_square",
]
