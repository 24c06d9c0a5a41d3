"""Static package metadata.

The ``version`` line is kept in sync with ``pyproject.toml`` by the release
tooling; the other values change only when the project is renamed.
"""

from __future__ import annotations

name = "snipkit"
title = "Small teaching utilities: case conversion, filters, folds, enums and a delayed square"
version = "1.0.0"
homepage = "https://github.com/snipkit/snipkit"
author = "snipkit maintainers"
author_email = "maintainers@snipkit.dev"
shell_command = "snipkit"

#: Identifiers lib_layered_config uses to derive per-platform config paths.
LAYEREDCONF_VENDOR = "snipkit"
LAYEREDCONF_APP = "snipkit"
LAYEREDCONF_SLUG = "snipkit"


def print_info() -> None:
    """Print the metadata above as aligned ``key = value`` lines.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for snipkit:
        ...
            version      = 1.0.0
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    print(f"Info for {name}:\n")
    for label, value in fields:
        print(f"    {label.ljust(pad)} = {value}")


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
