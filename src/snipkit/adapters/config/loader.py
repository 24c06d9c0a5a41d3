"""Layered configuration loading with profile support and caching."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from snipkit import __init__conf__

#: Bundled lowest-precedence configuration layer.
DEFAULT_CONFIG_FILENAME = "defaultconfig.toml"


class ConfigLoaderProtocol(Protocol):
    """Config loader callable that also exposes ``cache_clear``."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names that are empty, too long, or unsafe as path parts.

    Args:
        profile: Profile name to check.
        max_length: Upper bound on the name length. Defaults to
            ``DEFAULT_MAX_PROFILE_LENGTH``.

    Raises:
        ValueError: If lib_layered_config refuses the name.

    Examples:
        >>> validate_profile("staging-v2")

        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc
    """
    validate_profile_name(profile, max_length=max_length if max_length is not None else DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the path of the ``defaultconfig.toml`` shipped next to this module.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / DEFAULT_CONFIG_FILENAME


# One load per (profile, start_dir) for the lifetime of the process.
@lru_cache(maxsize=4)
def _read_layers(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load configuration merged from every layer.

    Layers, lowest to highest precedence: bundled defaults, app, host, user,
    ``.env``, environment variables. A profile inserts ``profile/<name>/``
    into every layer path.

    Args:
        profile: Optional profile name, validated before use.
        start_dir: Directory that seeds ``.env`` discovery. Defaults to the
            current working directory.

    Returns:
        Immutable configuration with provenance metadata.

    Example:
        >>> get_config().get("nonexistent", default="fallback")
        'fallback'
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layers(profile=profile, start_dir=start_dir)


def _cache_clear() -> None:
    """Drop cached loads so the next call re-reads every layer."""
    _read_layers.cache_clear()


# lru_cache's cache_clear is invisible to type checkers once the function is
# cast to the protocol, so it is attached explicitly.
_get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
