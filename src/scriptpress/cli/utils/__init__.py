"""CLI utilities for ScriptPress."""

from scriptpress.cli.utils.cli_handler import CLIHandler, cli_command

__all__ = ["CLIHandler", "cli_command"]
