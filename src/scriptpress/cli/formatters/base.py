"""Base formatter classes for CLI output."""

from __future__ import annotations

import builtins
from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, TypeVar

from rich.console import Console

T = TypeVar("T")


class OutputFormat(str, Enum):
    """Ways a command can present its result."""

    TABLE = "table"
    JSON = "json"


class OutputFormatter(ABC, Generic[T]):
    """Turns a command result into text for the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    @abstractmethod
    def format(self, data: T, format_type: OutputFormat = OutputFormat.TABLE) -> str:
        """Render data as plain text in the requested format."""

    def print(self, data: T, format_type: OutputFormat = OutputFormat.TABLE) -> None:
        """Format data and write it out.

        JSON bypasses Rich and goes straight to stdout so that it stays
        machine readable; tables are already rendered and printed verbatim.
        """
        output = self.format(data, format_type)
        if format_type == OutputFormat.JSON:
            builtins.print(output)
        else:
            self.console.print(output, markup=False, highlight=False, end="")
