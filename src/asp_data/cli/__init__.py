"""Command-line interface for database maintenance."""

from asp_data.cli.app import app, cli

__all__ = ["app", "cli"]
