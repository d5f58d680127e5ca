"""Export a script file to PDF."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scriptpress.api import ScriptExporter
from scriptpress.cli.utils.cli_handler import CLIHandler, cli_command
from scriptpress.config import get_settings_for_cli
from scriptpress.i18n import Locale

console = Console()


@cli_command
def export_command(
    script_path: Annotated[
        Path,
        typer.Argument(help="Path to the script file", resolve_path=True),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="PDF file to write (default: <title>.pdf beside the script)",
        ),
    ] = None,
    regular_font: Annotated[
        Path | None,
        typer.Option("--regular-font", help="TrueType font for regular text"),
    ] = None,
    bold_font: Annotated[
        Path | None,
        typer.Option("--bold-font", help="TrueType font for bold text"),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Lay out a script and write it as a PDF with scene bookmarks."""
    settings = get_settings_for_cli(
        cli_overrides={
            "regular_font_path": regular_font,
            "bold_font_path": bold_font,
        }
    )
    exporter = ScriptExporter(settings)
    result = exporter.export_file(script_path, output)

    locale = Locale.from_code(result.language)
    handler = CLIHandler(console)
    if json_output:
        handler.handle_success(locale.t("notices.exportSuccess"), result, True)
        return

    handler.handle_success(locale.t("notices.exportSuccess"))
    console.print(f"  {result.output_path}", markup=False)
    console.print(
        f"  {result.page_count} pages, {result.bookmark_count} scene bookmarks"
    )
