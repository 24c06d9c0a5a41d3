"""Call signatures the CLI expects from its configuration and logging adapters.

The production adapters (``adapters.config``, ``adapters.logging``) and the
in-memory ones (``adapters.memory``) are plain functions; they satisfy these
protocols structurally. ``Config`` is only imported for type checking.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Render a loaded configuration, optionally a single section of it."""

    def __call__(
        self,
        config: Config,
        *,
        output_format: OutputFormat = ...,
        section: str | None = ...,
        profile: str | None = ...,
    ) -> None: ...


class InitLogging(Protocol):
    """Start logging from the ``[lib_log_rich]`` section of ``config``."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
]
