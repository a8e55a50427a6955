"""CLI command implementations for the furniture application.

This package contains subcommands for the furniture CLI:
- validate: Validate a request file
"""

from furniture.cli.commands.validate import validate_command

__all__ = ["validate_command"]
