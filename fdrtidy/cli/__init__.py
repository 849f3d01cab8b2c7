"""Command-line interface for fdrtidy."""

from fdrtidy.cli.main import cli

__all__ = ["cli"]
