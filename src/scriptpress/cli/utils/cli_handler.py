"""Unified CLI handler for standardized error handling and output."""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

import typer
from rich.console import Console

from scriptpress.cli.formatters.json_formatter import JsonFormatter
from scriptpress.config import get_logger
from scriptpress.exceptions import ScriptPressError, ValidationError

logger = get_logger(__name__)


class CLIHandler:
    """Unified handler for CLI commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize CLI handler.

        Args:
            console: Rich console for output
        """
        self.console = console or Console()
        self.json_formatter = JsonFormatter()

    def handle_error(
        self, error: Exception, json_output: bool = False, exit_code: int = 1
    ) -> None:
        """Display an error and exit.

        ScriptPress errors are shown as message plus hint; anything else is
        shown as its string form.

        Args:
            error: Exception to handle
            json_output: Whether to output JSON
            exit_code: Exit code to use

        Raises:
            typer.Exit: Always, with ``exit_code``
        """
        logger.error(
            "Command failed", error=str(error), error_type=type(error).__name__
        )

        if json_output:
            print(self.json_formatter.format_error_response(error, exit_code))
        elif isinstance(error, ValidationError):
            self.console.print(f"[red]Validation Error: {error.message}[/red]")
        elif isinstance(error, ScriptPressError):
            self.console.print(f"[red]Error: {error.message}[/red]")
            if error.hint:
                self.console.print(f"[yellow]Hint: {error.hint}[/yellow]")
        else:
            self.console.print(f"[red]Error: {error}[/red]")

        raise typer.Exit(exit_code)

    def handle_success(
        self, message: str, data: Any = None, json_output: bool = False
    ) -> None:
        """Handle success responses consistently.

        Args:
            message: Success message
            data: Optional data to include
            json_output: Whether to output JSON
        """
        if json_output:
            print(self.json_formatter.format_success(message, data))
        else:
            self.console.print(f"[green]{message}[/green]")


def cli_command(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator for CLI commands with standardized error handling.

    Args:
        func: Command function

    Returns:
        Wrapped function
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except Exception as e:
            CLIHandler().handle_error(e, kwargs.get("json_output", False))

    return wrapper
