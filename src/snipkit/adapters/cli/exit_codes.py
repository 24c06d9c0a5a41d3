"""POSIX-conventional exit codes for CLI error paths.

Contents:
    * :class:`ExitCode` - IntEnum of the exit codes this application uses.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes raised via ``SystemExit`` by CLI commands.

    Values follow errno and sysexits.h where they apply:

    * 0–1: generic success / failure
    * 22: EINVAL, rejected command input (unknown config section,
      non-positive square input)
    * 78: EX_CONFIG, unusable configuration or profile
    * 130: SIGINT, informational only; lib_cli_exit_tools maps signals itself

    Example:
        >>> int(ExitCode.INVALID_ARGUMENT)
        22
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78
    SIGNAL_INT = 130


__all__ = ["ExitCode"]
