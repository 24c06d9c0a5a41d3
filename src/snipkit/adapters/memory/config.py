"""Configuration stand-ins for ``build_testing``.

The in-memory loader ignores profiles and discovery and always answers with
an empty :class:`Config`; ``--set`` overrides still apply on top of it.
The display stand-in renders nothing.
"""

from __future__ import annotations

from lib_layered_config import Config

from ...domain.enums import OutputFormat


def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    return Config({}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Discard the request; CLI tests assert on exit codes, not rendering."""


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
]
