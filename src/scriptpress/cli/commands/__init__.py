"""ScriptPress CLI commands."""

from __future__ import annotations

from scriptpress.cli.commands.characters import characters_command
from scriptpress.cli.commands.export import export_command
from scriptpress.cli.commands.metadata import metadata_command
from scriptpress.cli.commands.new import new_command
from scriptpress.cli.commands.parse import parse_command

__all__ = [
    "characters_command",
    "export_command",
    "metadata_command",
    "new_command",
    "parse_command",
]
