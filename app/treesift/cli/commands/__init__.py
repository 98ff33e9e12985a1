"""CLI commands for treesift.

This package contains all subcommand implementations.
"""

from treesift.cli.commands import find, profile

__all__ = ["find", "profile"]
