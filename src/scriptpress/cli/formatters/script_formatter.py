"""Rich formatters for parsed scripts."""

from __future__ import annotations

import io

from rich.console import Console
from rich.table import Table

from scriptpress.cli.formatters.base import OutputFormat, OutputFormatter
from scriptpress.cli.formatters.json_formatter import JsonFormatter
from scriptpress.parser.models import Script, ScriptElementType

# Longest preview of the first body line in the scene table
PREVIEW_LENGTH = 60


class ScriptFormatter(OutputFormatter[Script]):
    """Formatter for scene tables and title page metadata."""

    def format(
        self, data: Script, format_type: OutputFormat = OutputFormat.TABLE
    ) -> str:
        if format_type == OutputFormat.JSON:
            return JsonFormatter().format(data)
        return self._render(self.scene_table(data))

    def scene_table(self, script: Script) -> Table:
        """One row per scene with its element counts."""
        table = Table(title=script.title or "Untitled Script", show_lines=False)
        table.add_column("#", style="yellow", justify="right")
        table.add_column("Heading", style="cyan", no_wrap=False)
        table.add_column("Elements", justify="right")
        table.add_column("Dialogue", justify="right")
        table.add_column("Opening line", style="dim", no_wrap=False)

        for scene in script.scenes:
            dialogue = sum(
                1 for e in scene.elements if e.type is ScriptElementType.DIALOGUE
            )
            opening = scene.body_elements[0].content if scene.body_elements else ""
            if len(opening) > PREVIEW_LENGTH:
                opening = opening[: PREVIEW_LENGTH - 3] + "..."
            table.add_row(
                script.scene_label(scene) or "-",
                scene.heading or "[italic](before first scene)[/italic]",
                str(len(scene.elements)),
                str(dialogue),
                opening,
            )
        return table

    def metadata_table(self, script: Script) -> Table:
        """Title page fields, absent ones shown as ``-``."""
        table = Table(show_header=False, box=None)
        table.add_column("Field", style="bold")
        table.add_column("Value")
        rows = {
            "Title": script.title,
            "Subtitle": script.subtitle,
            "Writers": ", ".join(script.metadata.writer_list()),
            "Production company": script.prod_company,
            "Date": script.date,
            "Character folder": script.character_folder,
        }
        for field, value in rows.items():
            table.add_row(field, value or "-")
        return table

    def _render(self, table: Table) -> str:
        buffer = io.StringIO()
        Console(file=buffer, width=self.console.width).print(table)
        return buffer.getvalue()
