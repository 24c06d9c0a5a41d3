"""Commands exposing the domain utilities one by one.

Contents:
    * :func:`cli_case` - Upper/lower case conversion.
    * :func:`cli_size` - Size of a text or numeric value.
    * :func:`cli_day` - Weekend/weekday classification.
    * :func:`cli_most_expensive` - Priciest product of the sample catalogue.
    * :func:`cli_square` - Delayed asynchronous square.
    * :func:`cli_showcase` - Every utility on fixed sample inputs.
"""

from __future__ import annotations

import asyncio
import logging
import math

import rich_click as click

from snipkit.application.showcase import run_showcase
from snipkit.domain.days import day_type, parse_day
from snipkit.domain.deferred import square_async
from snipkit.domain.errors import NegativeValueError
from snipkit.domain.products import SAMPLE_PRODUCTS, most_expensive
from snipkit.domain.text import format_case
from snipkit.domain.values import size_of

from ..constants import CLICK_CONTEXT_SETTINGS
from ..exit_codes import ExitCode
from ._shared import log_scope

logger = logging.getLogger(__name__)


class NumberParamType(click.ParamType):
    """Click parameter accepting an int, or a finite float when it has a fraction or exponent."""

    name = "number"

    def convert(self, value: object, param: click.Parameter | None, ctx: click.Context | None) -> int | float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return value
        text = str(value)
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            self.fail(f"{text!r} is not a number", param, ctx)
        if not math.isfinite(number):
            self.fail(f"{text!r} is not a finite number", param, ctx)
        return number


NUMBER = NumberParamType()


def _as_raw_value(value: str) -> str | int | float:
    """Read ``value`` as a number when it parses as one, otherwise keep the text."""
    try:
        return NUMBER.convert(value, None, None)
    except click.BadParameter:
        return value


@click.command("case", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("text")
@click.option("--lower", is_flag=True, default=False, help="Lower-case instead of upper-case")
def cli_case(text: str, lower: bool) -> None:
    """Print TEXT upper-cased (or lower-cased with --lower)."""
    with log_scope("case", lower=lower):
        click.echo(format_case(text, not lower))


@click.command("size", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("value")
def cli_size(value: str) -> None:
    """Print the length of VALUE, or twice VALUE when it is a number."""
    raw = _as_raw_value(value)
    with log_scope("size", kind=type(raw).__name__):
        logger.debug("Sizing value", extra={"kind": type(raw).__name__})
        click.echo(size_of(raw))


@click.command("day", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
def cli_day(name: str) -> None:
    """Print Weekend or Weekday for the weekday NAME (e.g. 'saturday')."""
    try:
        day = parse_day(name)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="NAME") from exc
    with log_scope("day", day=day.name):
        click.echo(day_type(day).value)


@click.command("most-expensive", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_most_expensive() -> None:
    """Print the priciest product of the built-in sample catalogue."""
    with log_scope("most-expensive"):
        product = most_expensive(SAMPLE_PRODUCTS)
        if product is None:
            click.echo("No products")
            return
        click.echo(f"{product.name}: {product.price}")


@click.command("square", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("n", type=NUMBER)
def cli_square(n: int | float) -> None:
    """Print the square of N after a fixed one-second delay. N must be positive.

    Pass negative values after ``--`` (``square -- -3``).
    """
    with log_scope("square", n=n):
        try:
            result = asyncio.run(square_async(n))
        except NegativeValueError as exc:
            logger.warning("Square rejected", extra={"n": n, "error": str(exc)})
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
        click.echo(result)


@click.command("showcase", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_showcase() -> None:
    """Run every utility on sample inputs and print one line per result."""
    with log_scope("showcase"):
        logger.info("Running showcase")
        for entry in asyncio.run(run_showcase()):
            click.echo(f"{entry.label} -> {entry.result}")


__all__ = [
    "NUMBER",
    "NumberParamType",
    "cli_case",
    "cli_day",
    "cli_most_expensive",
    "cli_showcase",
    "cli_size",
    "cli_square",
]
