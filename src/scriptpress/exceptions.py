"""Errors raised by ScriptPress, each carrying a message and a fix-it hint."""

from __future__ import annotations

from typing import Any


class ScriptPressError(Exception):
    """Root of every error ScriptPress raises on purpose.

    The CLI shows ``message`` and ``hint`` to the user; ``details`` is extra
    context such as the offending path or config key.
    """

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Store the parts of the error.

        Args:
            message: What went wrong.
            hint: How the user can fix it, if known.
            details: Extra key/value context.
        """
        self.message = message
        self.hint = hint
        self.details = details
        super().__init__(self.format_error())

    def format_error(self) -> str:
        """Join message, hint and details into one multi-line string."""
        output = f"Error: {self.message}"
        if self.hint:
            output += f"\nHint: {self.hint}"
        if self.details:
            details_str = "\n".join(
                f"  {key}: {value}" for key, value in self.details.items()
            )
            output += f"\nDetails:\n{details_str}"
        return output


class ConfigurationError(ScriptPressError):
    """Bad settings values, unknown config keys or unreadable config files."""

    pass


class ParseError(ScriptPressError):
    """Script file errors that prevent the text from being read at all."""

    pass


class ScriptPressFileNotFoundError(ScriptPressError):
    """A script, font or config path that does not exist."""

    pass


class ValidationError(ScriptPressError):
    """User input rejected before any work starts, such as an empty title."""

    pass


class RenderError(ScriptPressError):
    """Render target failures such as unreadable fonts or unwritable output."""

    pass


def check_config_keys(config: dict[str, Any]) -> None:
    """Reject config keys that are easy to guess wrong.

    Args:
        config: Raw mapping loaded from a config file.

    Raises:
        ConfigurationError: If a known misspelling is present, naming the
            key that should be used instead.
    """
    wrong_keys = {
        "font_size": "default_font_size",
        "margin_size": "margin",
        "regular_font": "regular_font_path",
        "bold_font": "bold_font_path",
        "language": "default_language",
    }

    for wrong, correct in wrong_keys.items():
        if wrong in config:
            raise ConfigurationError(
                message=f"Invalid configuration key '{wrong}'",
                hint=f"Use '{correct}' instead of '{wrong}'",
                details={
                    "found_keys": list(config.keys()),
                    "invalid_key": wrong,
                    "correct_key": correct,
                },
            )
