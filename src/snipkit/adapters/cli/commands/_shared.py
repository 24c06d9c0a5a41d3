"""Shared helpers for CLI command modules.

Contents:
    * :func:`log_scope` - Bind command context to log records when logging is live.
"""

from __future__ import annotations

import contextlib
from collections.abc import Iterator

import lib_log_rich.runtime


@contextlib.contextmanager
def log_scope(command: str, **extra: object) -> Iterator[None]:
    """Bind ``job_id`` and ``extra`` fields for the duration of a command.

    Runs unbound when the lib_log_rich runtime was never started, as under
    the in-memory services used by tests.
    """
    if not lib_log_rich.runtime.is_initialised():
        yield
        return
    with lib_log_rich.runtime.bind(job_id=f"cli-{command}", extra={"command": command, **extra}):
        yield


__all__ = ["log_scope"]
