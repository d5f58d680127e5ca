"""Create a new script file with a frontmatter block."""

from __future__ import annotations

from datetime import date as date_type
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scriptpress.api import SCRIPT_SUFFIX, new_script_text, safe_filename
from scriptpress.cli.utils.cli_handler import CLIHandler, cli_command
from scriptpress.exceptions import ValidationError

console = Console()


@cli_command
def new_command(
    title: Annotated[str, typer.Argument(help="Title of the new script")],
    author: Annotated[
        str,
        typer.Option("--author", "-a", help="Writers, separated by commas"),
    ] = "",
    prod_company: Annotated[
        str, typer.Option("--prod-company", help="Production company")
    ] = "",
    date: Annotated[
        str | None,
        typer.Option("--date", help="Date (YYYY-MM-DD, default: today)"),
    ] = None,
    directory: Annotated[
        Path,
        typer.Option("--dir", "-d", help="Directory to create the script in"),
    ] = Path(),
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Create an empty script with its title page filled in."""
    if not title.strip():
        raise ValidationError(
            message="Script title must not be empty",
            hint="Pass the title as the first argument",
        )

    path = directory / f"{safe_filename(title)}{SCRIPT_SUFFIX}"
    if path.exists():
        raise ValidationError(
            message=f"File already exists: {path}",
            hint="Choose another title or directory",
            details={"file": str(path)},
        )

    text = new_script_text(
        title=title.strip(),
        writers=author,
        prod_company=prod_company,
        date=date or date_type.today().isoformat(),
    )
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")

    CLIHandler(console).handle_success(
        f"Created {path}", {"path": str(path)}, json_output
    )
