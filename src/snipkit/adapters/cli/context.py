"""State shared between the root group and its subcommands.

Contents:
    * :class:`CLIContext` - What the root group hands to every subcommand.
    * :class:`TracebackState` - Snapshot of lib_cli_exit_tools' traceback flags.
    * Helpers to store/fetch the context and to toggle traceback output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from snipkit.composition import AppServices


class TracebackState(NamedTuple):
    """``lib_cli_exit_tools.config`` traceback flags at one point in time."""

    enabled: bool
    force_color: bool


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Resolved configuration plus the services that produced it.

    ``profile`` and ``set_overrides`` are what the root group was called
    with; ``config`` already has the overrides applied.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> CLIContext:
    """Swap the services factory in ``ctx.obj`` for a :class:`CLIContext`.

    ``set_overrides`` is kept so a subcommand reloading another profile can
    apply them again.
    """
    cli_ctx = CLIContext(traceback, config, services, profile, set_overrides)
    ctx.obj = cli_ctx
    return cli_ctx


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Fetch the :class:`CLIContext` a subcommand runs under.

    Raises:
        RuntimeError: When the root group has not stored one yet.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> ctx.obj = CLIContext(traceback=True, config=MagicMock(), services=MagicMock())
        >>> get_cli_context(ctx).traceback
        True
    """
    obj = ctx.obj
    if isinstance(obj, CLIContext):
        return obj
    raise RuntimeError("CLI context not initialized. Call store_cli_context first.")


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full (colored) tracebacks on or off for lib_cli_exit_tools.

    Example:
        >>> apply_traceback_preferences(False)
        >>> lib_cli_exit_tools.config.traceback
        False
    """
    flag = bool(enabled)
    lib_cli_exit_tools.config.traceback = flag
    lib_cli_exit_tools.config.traceback_force_color = flag


def snapshot_traceback_state() -> TracebackState:
    cfg = lib_cli_exit_tools.config
    return TracebackState(
        enabled=bool(getattr(cfg, "traceback", False)),
        force_color=bool(getattr(cfg, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    lib_cli_exit_tools.config.traceback = state.enabled
    lib_cli_exit_tools.config.traceback_force_color = state.force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
