"""Adapters layer - infrastructure and framework integrations.

Connects the pure domain utilities to the outside world: layered
configuration, the lib_log_rich runtime, and the Click console front-end.

Contents:
    * :mod:`.config` - Configuration loading, display, and ``--set`` overrides
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory stand-ins used by tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
