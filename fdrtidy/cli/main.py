"""Command-line interface for fdrtidy.

Reads a saved q-value result and prints one of its tables.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click
import pandas as pd

from fdrtidy import __version__, tidiers
from fdrtidy.config import config
from fdrtidy.core.results import MissingFieldError
from fdrtidy.export import FORMATS, as_frame, render
from fdrtidy.loader import ResultLoadError, load_result

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool, quiet: bool) -> None:
    if verbose and quiet:
        raise click.UsageError("Cannot use --verbose and --quiet together.")

    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=config.log_format, datefmt=config.log_datefmt)


def _output_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add the options shared by every table command."""
    options = [
        click.option(
            "--format",
            "-f",
            "fmt",
            type=click.Choice(FORMATS),
            default=config.default_format,
            show_default=True,
            help="Output format.",
        ),
        click.option(
            "--output",
            "-o",
            type=click.Path(dir_okay=False, path_type=Path),
            help="Write the table to a file instead of stdout.",
        ),
        click.option("--verbose", "-v", is_flag=True, help="Verbose output."),
        click.option("--quiet", "-q", is_flag=True, help="Only report errors."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _emit(
    result_file: Path,
    build: Callable[[Any], Any],
    fmt: str,
    output: Path | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Load a result, build a table from it and write the rendered table."""
    _configure_logging(verbose, quiet)

    try:
        result = load_result(result_file)
        table = build(result)
    except (MissingFieldError, ResultLoadError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    text = render(table, fmt)
    if output is None:
        click.echo(text, nl=not text.endswith("\n"))
        return

    try:
        output.write_text(text if text.endswith("\n") else text + "\n", encoding="utf-8")
    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    logger.info("Wrote %d rows to %s", len(as_frame(table)), output)


def _read_data(data: Path) -> pd.DataFrame:
    """Read the original data CSV for augment, exiting on unreadable input."""
    try:
        return pd.read_csv(data)
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as e:
        click.echo(f"Error: Cannot read data file {data}: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(
    version=__version__,
    prog_name="fdrtidy",
    message=f"%(prog)s, version %(version)s (config {config.config_version})",
)
def cli() -> None:
    """fdrtidy - Tidy tables from false discovery rate results.

    Converts saved q-value results (JSON or YAML) into a lambda sweep table,
    a per-record table, or a one-row summary.
    """
    pass


@cli.command("tidy")
@click.argument("result_file", type=click.Path(dir_okay=False, path_type=Path))
@_output_options
def tidy_command(
    result_file: Path, fmt: str, output: Path | None, verbose: bool, quiet: bool
) -> None:
    """Show how the pi0 estimate depends on lambda.

    Prints one row per lambda value, with smoothed estimates listed after the
    raw ones.

    Examples:

        fdrtidy tidy result.json

        fdrtidy tidy result.yaml --format markdown
    """
    _emit(
        result_file,
        lambda result: tidiers.tidy(result, flavor="frame"),
        fmt,
        output,
        verbose,
        quiet,
    )


@cli.command("augment")
@click.argument("result_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--data",
    "-d",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="CSV file with the original data, one row per p-value in the same order.",
)
@_output_options
def augment_command(
    result_file: Path,
    data: Path | None,
    fmt: str,
    output: Path | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Print p-values with their q-values and local FDR.

    With --data, the original data columns are placed first. Original columns
    take precedence over computed columns of the same name.
    """
    original = _read_data(data) if data is not None else None
    _emit(
        result_file,
        lambda result: tidiers.augment(result, original, flavor="frame"),
        fmt,
        output,
        verbose,
        quiet,
    )


@cli.command("glance")
@click.argument("result_file", type=click.Path(dir_okay=False, path_type=Path))
@_output_options
def glance_command(
    result_file: Path, fmt: str, output: Path | None, verbose: bool, quiet: bool
) -> None:
    """Print the chosen pi0 and the lambda that produced it.

    lambda is NA when it cannot be recovered (typically when pi0 is 1).
    """
    _emit(
        result_file,
        lambda result: tidiers.glance(result, flavor="frame"),
        fmt,
        output,
        verbose,
        quiet,
    )


if __name__ == "__main__":
    cli()
