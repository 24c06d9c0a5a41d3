"""The ``snipkit`` command group.

The group resolves configuration (profile, then ``--set`` overrides), starts
logging from it, and leaves a :class:`~.context.CLIContext` behind for the
subcommand that runs next.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from snipkit import __init__conf__
from snipkit.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from snipkit.composition import AppServices

logger = logging.getLogger(__name__)

_VERSION_MESSAGE = f"{__init__conf__.shell_command} version {__init__conf__.version}"


def _resolve_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Load ``profile`` and layer the ``--set`` overrides on top.

    A profile lib_layered_config refuses ends the run with CONFIG_ERROR; a
    malformed override is a usage error.
    """
    try:
        loaded = services.get_config(profile=profile)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc
    try:
        return apply_overrides(loaded, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(__init__conf__.version, prog_name=__init__conf__.shell_command, message=_VERSION_MESSAGE)
@click.option("--traceback/--no-traceback", default=False, help="Print the full traceback when a command fails")
@click.option("--profile", default=None, help="Configuration profile to load, e.g. 'staging'")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value; may be given several times.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Resolve configuration and logging, then run the requested command.

    ``ctx.obj`` must be a zero-argument services factory such as
    :func:`snipkit.composition.build_production`.

    Example:
        >>> from click.testing import CliRunner
        >>> from snipkit.composition import build_testing
        >>> CliRunner().invoke(cli, ["day", "sunday"], obj=build_testing).output
        'Weekend\\n'
    """
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = factory()
    config = _resolve_config(services, profile, set_overrides)
    services.init_logging(config)
    logger.debug("Configuration resolved", extra={"profile": profile, "overrides": len(set_overrides)})

    store_cli_context(
        ctx, traceback=traceback, config=config, services=services, profile=profile, set_overrides=set_overrides
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register_commands() -> None:
    # Deferred: the command modules import this package.
    from . import commands

    for name in commands.__all__:
        cli.add_command(getattr(commands, name))


_register_commands()


__all__ = ["cli"]
