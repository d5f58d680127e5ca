"""Parse a script file and show its scene structure."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scriptpress.cli.formatters import OutputFormat, ScriptFormatter
from scriptpress.cli.utils.cli_handler import cli_command
from scriptpress.parser import ScriptParser

console = Console()


@cli_command
def parse_command(
    script_path: Annotated[
        Path,
        typer.Argument(help="Path to the script file", resolve_path=True),
    ],
    json_output: Annotated[
        bool, typer.Option("--json", help="Output the parsed tree as JSON")
    ] = False,
) -> None:
    """Parse a script and list its scenes.

    Content written before the first scene heading is shown as an
    unnumbered scene.
    """
    script = ScriptParser().parse_file(script_path)

    formatter = ScriptFormatter(console)
    if json_output:
        formatter.print(script, OutputFormat.JSON)
        return

    formatter.print(script)
    numbered = len(script.numbered_scenes)
    console.print(
        f"\n[green]Parsed {numbered} scene{'s' if numbered != 1 else ''}[/green]"
    )
