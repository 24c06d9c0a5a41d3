"""``--set SECTION.KEY=VALUE`` overrides layered on top of a loaded Config."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Python types an override value can be coerced to."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed override: top-level section, nested key path, value."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def coerce_value(raw: str) -> CoercedValue:
    """Decode ``raw`` as JSON, keeping it as a plain string when that fails.

    Examples:
        >>> coerce_value("false")
        False
        >>> coerce_value("1.5")
        1.5
        >>> coerce_value("null")
        >>> coerce_value("WARNING")
        'WARNING'
        >>> coerce_value("")
        ''
    """
    if not raw:
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    The path ends at the first ``=``; the section ends at the first dot.

    Raises:
        ValueError: If ``=`` is missing, the path has no dot, or any path
            component is empty.

    Examples:
        >>> parse_override("lib_log_rich.console_level=WARNING")
        ConfigOverride(section='lib_log_rich', key_path=('console_level',), value='WARNING')
        >>> parse_override("lib_log_rich.payload_limits.max_chars=4096").key_path
        ('payload_limits', 'max_chars')
    """
    if "=" not in raw:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    path, value = raw.split("=", maxsplit=1)
    if "." not in path:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *keys = path.split(".")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(keys):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=tuple(keys), value=coerce_value(value))


def _merge_into(tree: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Write ``override`` into ``tree``, creating intermediate tables.

    Raises:
        TypeError: If an intermediate key already holds a non-table value.

    Example:
        >>> tree: dict[str, dict[str, object]] = {}
        >>> _merge_into(tree, ConfigOverride("a", ("b", "c"), 1))
        >>> tree
        {'a': {'b': {'c': 1}}}
    """
    node: dict[str, object] = tree.setdefault(override.section, {})
    *parents, leaf = override.key_path
    for key in parents:
        child = node.setdefault(key, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {key!r}, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[leaf] = override.value


def apply_overrides(config: Config, raw_overrides: Iterable[str]) -> Config:
    """Return ``config`` with every ``--set`` override deep-merged in.

    The original Config is returned unchanged when there is nothing to apply.

    Raises:
        ValueError: If any override is malformed.

    Example:
        >>> cfg = Config({"lib_log_rich": {"environment": "prod"}}, {})
        >>> apply_overrides(cfg, ["lib_log_rich.environment=dev"])["lib_log_rich"]["environment"]
        'dev'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    tree: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _merge_into(tree, parse_override(raw))
    if not tree:
        return config
    return config.with_overrides(tree)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
