"""Exit code values and the command paths that raise them."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result

from snipkit.adapters import cli as cli_mod
from snipkit.adapters.cli import ExitCode


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "value"),
    [
        (ExitCode.SUCCESS, 0),
        (ExitCode.GENERAL_ERROR, 1),
        (ExitCode.INVALID_ARGUMENT, 22),
        (ExitCode.CONFIG_ERROR, 78),
        (ExitCode.SIGNAL_INT, 130),
    ],
)
def test_exit_code_values(member: ExitCode, value: int) -> None:
    assert member == value


@pytest.mark.os_agnostic
def test_rejected_square_exits_with_invalid_argument(
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["square", "--", "-2"], obj=testing_factory)

    assert result.exit_code == ExitCode.INVALID_ARGUMENT


@pytest.mark.os_agnostic
def test_main_returns_invalid_argument_for_rejected_square(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    from snipkit.composition import build_testing

    exit_code = cli_mod.main(["square", "--", "-2"], services_factory=build_testing)

    assert exit_code == ExitCode.INVALID_ARGUMENT
    assert "Negative number not allowed" in capsys.readouterr().err


@pytest.mark.os_agnostic
def test_bad_profile_exits_with_config_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    clear_config_cache: None,
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["--profile", "../x", "info"], obj=production_factory)

    assert result.exit_code == ExitCode.CONFIG_ERROR


@pytest.mark.os_agnostic
def test_get_cli_context_requires_root_command() -> None:
    import click

    ctx = click.Context(cli_mod.cli_info, obj=None)

    with pytest.raises(RuntimeError, match="CLI context not initialized"):
        cli_mod.get_cli_context(ctx)
