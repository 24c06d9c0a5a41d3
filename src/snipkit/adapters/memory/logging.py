"""In-memory logging adapter.

Stands in for the lib_log_rich runtime when commands run under
``build_testing``: log records stay with the standard library's default
handlers and the configuration is ignored.
"""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """Accept and ignore ``config`` -- satisfies the InitLogging protocol."""


__all__ = ["init_logging_in_memory"]
