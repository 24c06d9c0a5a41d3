"""``snipkit config``: print the merged configuration."""

from __future__ import annotations

import logging

import rich_click as click
from lib_layered_config import Config

from snipkit.adapters.config.overrides import apply_overrides
from snipkit.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode
from ._shared import log_scope

logger = logging.getLogger(__name__)

_FORMAT_CHOICE = click.Choice([member.value for member in OutputFormat], case_sensitive=False)


def _config_for(cli_ctx: CLIContext, profile: str | None) -> tuple[Config, str | None]:
    """Pick the configuration to print and the profile it came from.

    Without ``profile`` the root group's configuration is reused. With one,
    that profile is loaded and the root ``--set`` overrides are applied to
    it again.
    """
    if not profile:
        return cli_ctx.config, cli_ctx.profile
    try:
        reloaded = cli_ctx.services.get_config(profile=profile)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc
    return apply_overrides(reloaded, cli_ctx.set_overrides), profile


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--format", "output_format", type=_FORMAT_CHOICE, default=OutputFormat.HUMAN.value, help="human or json")
@click.option("--section", default=None, help="Print one top-level section only, e.g. 'lib_log_rich'")
@click.option("--profile", default=None, help="Load this profile instead of the root group's")
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Show configuration merged from every layer.

    Lowest to highest: defaults, app, host, user, .env, environment, --set.
    """
    cli_ctx = get_cli_context(ctx)
    config, shown_profile = _config_for(cli_ctx, profile)
    fmt = OutputFormat(output_format.lower())

    with log_scope("config", format=fmt.value, profile=shown_profile):
        logger.info("Displaying configuration", extra={"section": section})
        try:
            cli_ctx.services.display_config(config, output_format=fmt, section=section, profile=shown_profile)
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
