"""Package metadata command.

Contents:
    * :func:`cli_info` - Display package metadata.
"""

from __future__ import annotations

import logging

import rich_click as click

from snipkit import __init__conf__

from ..constants import CLICK_CONTEXT_SETTINGS
from ._shared import log_scope

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print name, version, homepage and author of the installed package."""
    with log_scope("info"):
        logger.info("Displaying package information")
        __init__conf__.print_info()


__all__ = ["cli_info"]
