"""Run the root group and turn whatever happens into a process exit code.

Contents:
    * :func:`main` - Shared by the ``snipkit`` console script and ``python -m snipkit``.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from snipkit import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import apply_traceback_preferences, restore_traceback_state, snapshot_traceback_state

if TYPE_CHECKING:
    from snipkit.composition import AppServices


def _report_failure(exc: BaseException) -> int:
    """Print ``exc`` through lib_cli_exit_tools and return its exit code."""
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    apply_traceback_preferences(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    # Click runs non-standalone so ``obj`` can carry the services factory;
    # its own exceptions are rendered here instead.
    from .root import cli

    try:
        cli.main(
            args=list(sys.argv[1:] if argv is None else argv),
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # SystemExit and KeyboardInterrupt too
        return _report_failure(exc)
    return 0


def _shutdown_logging() -> None:
    # Only the main thread owns the lib_log_rich runtime.
    if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run ``snipkit`` with ``argv`` and return the exit code.

    Args:
        argv: Arguments after the program name; ``None`` reads ``sys.argv``.
        restore_traceback: Put the traceback flags back the way they were.
        services_factory: Builds the :class:`AppServices`; the console script
            passes ``build_production``.

    Raises:
        ValueError: Without a ``services_factory``.

    Example:
        >>> from snipkit.composition import build_testing
        >>> main(["case", "hi"], services_factory=build_testing)
        HI
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    saved = snapshot_traceback_state()
    try:
        return _run_cli(argv, services_factory=services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(saved)
        _shutdown_logging()


__all__ = ["main"]
