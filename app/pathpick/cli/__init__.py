"""CLI package for pathpick.

This package contains the Typer application and all subcommands.
"""

from pathpick.cli.main import app

__all__ = ["app"]
