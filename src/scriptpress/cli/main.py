"""Main CLI entry point."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scriptpress import __version__
from scriptpress.cli.commands import (
    characters_command,
    export_command,
    metadata_command,
    new_command,
    parse_command,
)
from scriptpress.cli.formatters.json_formatter import JsonFormatter
from scriptpress.cli.utils.cli_handler import CLIHandler
from scriptpress.config import (
    clear_settings_cache,
    configure_logging,
    get_logger,
    get_settings,
    get_settings_for_cli,
    set_settings,
)

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="scriptpress",
    help="Screenplay markup to paginated, bidirectional PDF",
    pretty_exceptions_enable=False,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="parse")(parse_command)
app.command(name="export")(export_command)
app.command(name="new")(new_command)
app.command(name="metadata")(metadata_command)
app.command(name="characters")(characters_command)


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show ScriptPress version."""
    version_info = {
        "name": "ScriptPress",
        "version": __version__,
        "description": "Screenplay markup to paginated, bidirectional PDF",
    }

    if json_output:
        print(JsonFormatter().format(version_info))
    else:
        console.print(f"ScriptPress v{version_info['version']}")


@app.callback()
def main_callback(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file (YAML, TOML, or JSON)",
            envvar="SCRIPTPRESS_CONFIG",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging (INFO level)"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug", help="Enable debug logging", envvar="SCRIPTPRESS_DEBUG"
        ),
    ] = False,
) -> None:
    """Configure global options."""
    if debug:
        os.environ["SCRIPTPRESS_LOG_LEVEL"] = "DEBUG"
        os.environ["SCRIPTPRESS_DEBUG"] = "true"
    elif verbose:
        os.environ["SCRIPTPRESS_LOG_LEVEL"] = "INFO"

    if debug or verbose:
        clear_settings_cache()

    if config:
        try:
            set_settings(get_settings_for_cli(config_file=config))
        except Exception as e:
            CLIHandler(console).handle_error(e)

    if debug or verbose or config:
        configure_logging(get_settings())
        logger.debug("Logging configured", debug=debug, verbose=verbose)


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
