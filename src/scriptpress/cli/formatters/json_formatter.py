"""JSON output formatter for CLI."""

from __future__ import annotations

import json
from typing import Any

from scriptpress.cli.formatters.base import OutputFormat, OutputFormatter


class JsonFormatter(OutputFormatter[Any]):
    """Generic JSON formatter for CLI output."""

    def format(self, data: Any, format_type: OutputFormat = OutputFormat.JSON) -> str:  # noqa: ARG002
        """Format data as JSON.

        Objects exposing ``to_dict`` (scripts, layouts, export results) are
        converted first; non-ASCII text is written as-is so Hebrew and Arabic
        titles stay readable.

        Args:
            data: Data to format
            format_type: Output format type (ignored, always JSON)

        Returns:
            JSON string
        """
        if hasattr(data, "to_dict"):
            data = data.to_dict()
        elif hasattr(data, "model_dump"):
            data = data.model_dump()
        elif not isinstance(data, dict | list | tuple | str | int | float | bool):
            data = {"value": data}
        return json.dumps(data, default=str, indent=2, ensure_ascii=False)

    def format_success(self, message: str, data: Any = None) -> str:
        """Format a success response.

        Args:
            message: Success message
            data: Optional additional data

        Returns:
            JSON string
        """
        response: dict[str, Any] = {"success": True, "message": message}
        if data is not None:
            response["data"] = data.to_dict() if hasattr(data, "to_dict") else data
        return json.dumps(response, default=str, indent=2, ensure_ascii=False)

    def format_error_response(self, error: str | Exception, code: int = 1) -> str:
        """Format an error response.

        Args:
            error: Error message or exception
            code: Error code

        Returns:
            JSON string
        """
        response: dict[str, Any] = {"success": False, "code": code}
        if isinstance(error, Exception):
            response["error"] = getattr(error, "message", str(error))
            hint = getattr(error, "hint", None)
            if hint:
                response["hint"] = hint
        else:
            response["error"] = error
        return json.dumps(response, default=str, indent=2, ensure_ascii=False)
