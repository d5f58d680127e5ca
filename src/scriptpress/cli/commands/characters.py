"""List the characters that speak in a script."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scriptpress.cli.formatters import JsonFormatter
from scriptpress.cli.utils.cli_handler import cli_command
from scriptpress.parser import ScriptParser

console = Console()


@cli_command
def characters_command(
    script_path: Annotated[
        Path,
        typer.Argument(help="Path to the script file", resolve_path=True),
    ],
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List character cues in order of first appearance."""
    script = ScriptParser().parse_file(script_path)
    names = script.characters()

    if json_output:
        print(JsonFormatter().format(names))
        return

    if not names:
        console.print("[yellow]No characters found.[/yellow]")
        return
    for name in names:
        console.print(f"  {name}", markup=False)
