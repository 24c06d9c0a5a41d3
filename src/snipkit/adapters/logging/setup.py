"""lib_log_rich runtime setup shared by every entry point.

The console script, ``python -m snipkit`` and the CLI tests all route
through :func:`init_logging`, so the runtime is configured the same way no
matter how the package is invoked, and only once per process.

Contents:
    * :class:`LoggingConfigModel` – validated view of the ``[lib_log_rich]`` section.
    * :func:`init_logging` – idempotent runtime initialisation.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from snipkit import __init__conf__

#: Configuration section read by :func:`init_logging`.
LOGGING_SECTION = "lib_log_rich"


class LoggingConfigModel(BaseModel):
    """Typed ``[lib_log_rich]`` section.

    Only the fields this package fills in itself are declared; any other key
    is kept as an extra and forwarded to ``lib_log_rich.runtime.RuntimeConfig``.

    Example:
        >>> LoggingConfigModel(environment="staging").environment
        'staging'
        >>> LoggingConfigModel().service is None
        True
    """

    service: str | None = None
    environment: str = "prod"
    console_level: str | None = None

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a RuntimeConfig.

    ``service`` falls back to the package name. Unset optional fields are
    dropped so lib_log_rich applies its own defaults.
    """
    section: object = config.get(LOGGING_SECTION, default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", section) if section else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Initialise the lib_log_rich runtime from ``config`` once per process.

    Loads ``.env`` so ``LOG_*`` variables take part, then starts the runtime
    and attaches it to the standard :mod:`logging` tree, which is what the
    adapters log through. Later calls return immediately.

    Args:
        config: Loaded layered configuration carrying the ``[lib_log_rich]`` section.

    Example:
        >>> from lib_layered_config import Config
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LOGGING_SECTION",
    "LoggingConfigModel",
    "init_logging",
]
