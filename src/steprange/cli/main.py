"""CLI entry point for steprange.

Provides the ``steprange`` command with subcommands:

- ``list`` -- print every value of a range, forward or reversed.
- ``info`` -- print a range's size and its first and last values.

Bounds follow the builtin ``range``: ``STOP``, ``START STOP`` or
``START STOP STEP``. Use ``--`` before bounds when the first one is
negative and looks like an option.
"""

from __future__ import annotations

import logging
import sys

import click
from dotenv import load_dotenv

from steprange.config import get_settings
from steprange.core.step_range import StepRange
from steprange.errors import RangeError
from steprange.numeric.dtypes import DTYPES


class NumberParamType(click.ParamType):
    """Parses ``int`` where possible, ``float`` otherwise."""

    name = "number"

    def convert(self, value, param, ctx):
        if isinstance(value, (int, float)):
            return value
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            self.fail(f"{value!r} is not a valid number", param, ctx)


NUMBER = NumberParamType()

_RANGE_COMMAND = {"ignore_unknown_options": True}


@click.group()
@click.version_option(package_name="steprange")
def cli() -> None:
    """steprange -- lazily evaluated numeric ranges."""


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------


@cli.command(name="list", context_settings=_RANGE_COMMAND)
@click.argument("bounds", nargs=-1, type=NUMBER, required=True)
@click.option("--dtype", type=click.Choice(sorted(DTYPES)), default=None, help="Element type of the range.")
@click.option("--reverse", is_flag=True, help="Print values from last to first.")
@click.option("--env-file", default=".env", show_default=True, help="Path to .env file.")
@click.option("-v", "--verbose", is_flag=True, help="Enable DEBUG logging.")
def list_values(
    bounds: tuple,
    dtype: str | None,
    reverse: bool,
    env_file: str,
    verbose: bool,
) -> None:
    """Print the values of range(BOUNDS), one per line.

    \b
    Example:
        steprange list 5
        steprange list 0 10 2 --reverse
        steprange list --dtype int8 -- -5 5 3
    """
    r = _build_range(bounds, dtype, env_file, verbose)
    for value in reversed(r) if reverse else r:
        click.echo(value)


# ---------------------------------------------------------------------------
# info
# ---------------------------------------------------------------------------


@cli.command(context_settings=_RANGE_COMMAND)
@click.argument("bounds", nargs=-1, type=NUMBER, required=True)
@click.option("--dtype", type=click.Choice(sorted(DTYPES)), default=None, help="Element type of the range.")
@click.option("--env-file", default=".env", show_default=True, help="Path to .env file.")
@click.option("-v", "--verbose", is_flag=True, help="Enable DEBUG logging.")
def info(bounds: tuple, dtype: str | None, env_file: str, verbose: bool) -> None:
    """Show the size and end values of range(BOUNDS)."""
    r = _build_range(bounds, dtype, env_file, verbose)
    click.echo(f"Range:  {r!r}")
    click.echo(f"Size:   {len(r)}")
    if r.empty():
        click.echo("First:  -")
        click.echo("Last:   -")
    else:
        click.echo(f"First:  {r.first}")
        click.echo(f"Last:   {r.last}")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _build_range(bounds: tuple, dtype: str | None, env_file: str, verbose: bool) -> StepRange:
    """Load configuration and construct the range, exiting on bad input."""
    if len(bounds) > 3:
        raise click.UsageError(f"expected at most 3 bounds, got {len(bounds)}")

    load_dotenv(env_file, override=False)
    get_settings.cache_clear()
    try:
        settings = get_settings()
    except Exception as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)

    _setup_logging(verbose, settings.logging_level)

    try:
        return StepRange(*bounds, dtype=dtype)
    except RangeError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------


def _setup_logging(verbose: bool, level: int = logging.WARNING) -> None:
    """Configure the root logger."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else level,
        format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Package entry point (``steprange`` console script)."""
    cli()


if __name__ == "__main__":
    main()
