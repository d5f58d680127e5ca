"""Show the title page metadata of a script."""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scriptpress.cli.formatters import JsonFormatter, ScriptFormatter
from scriptpress.cli.utils.cli_handler import cli_command
from scriptpress.parser import ScriptParser

console = Console()


@cli_command
def metadata_command(
    script_path: Annotated[
        Path,
        typer.Argument(help="Path to the script file", resolve_path=True),
    ],
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show the frontmatter fields of a script."""
    script = ScriptParser().parse_file(script_path)

    if json_output:
        data = asdict(script.metadata)
        data["writer_list"] = script.metadata.writer_list()
        print(JsonFormatter().format(data))
        return

    if script.metadata.is_empty():
        console.print("[yellow]No frontmatter found.[/yellow]")
        return
    console.print(ScriptFormatter(console).metadata_table(script))
