"""CLI commands for pathpick.

This package contains all subcommand implementations.
"""

from pathpick.cli.commands import check, config, listing, pick

__all__ = ["check", "config", "listing", "pick"]
