"""CLI package providing the command-line interface.

Re-exports the public symbols of its submodules so callers and tests import
from one place.

Contents:
    * Click context helpers and traceback state management from :mod:`.context`
    * Root command group from :mod:`.root`
    * Entry point from :mod:`.main`
    * All command functions from :mod:`.commands`
    * Exit codes from :mod:`.exit_codes`
"""

from __future__ import annotations

from .commands import (
    cli_case,
    cli_config,
    cli_day,
    cli_info,
    cli_most_expensive,
    cli_showcase,
    cli_size,
    cli_square,
)
from .constants import CLICK_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    CLIContext,
    TracebackState,
    apply_traceback_preferences,
    get_cli_context,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    # Constants
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    "ExitCode",
    # Traceback management
    "TracebackState",
    "apply_traceback_preferences",
    "restore_traceback_state",
    "snapshot_traceback_state",
    # Context helpers
    "CLIContext",
    "get_cli_context",
    "store_cli_context",
    # Root command
    "cli",
    # Entry point
    "main",
    # Commands
    "cli_case",
    "cli_config",
    "cli_day",
    "cli_info",
    "cli_most_expensive",
    "cli_showcase",
    "cli_size",
    "cli_square",
]
