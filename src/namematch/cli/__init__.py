"""Command-line interface for namematch."""

from namematch.cli.main import cli

__all__ = ["cli"]
