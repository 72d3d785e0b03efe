"""Command line interface for pollwatch."""

from pollwatch.cli.main import cli, main

__all__ = ["cli", "main"]
