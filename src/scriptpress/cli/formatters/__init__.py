"""Output formatters for ScriptPress CLI."""

from __future__ import annotations

from scriptpress.cli.formatters.base import OutputFormat, OutputFormatter
from scriptpress.cli.formatters.json_formatter import JsonFormatter
from scriptpress.cli.formatters.script_formatter import ScriptFormatter

__all__ = [
    "JsonFormatter",
    "OutputFormat",
    "OutputFormatter",
    "ScriptFormatter",
]
