"""ScriptPress API module."""

from .export import (
    DEFAULT_FILE_STEM,
    SCRIPT_SUFFIX,
    ExportResult,
    ScriptExporter,
    new_script_text,
    safe_filename,
)

__all__ = [
    "DEFAULT_FILE_STEM",
    "SCRIPT_SUFFIX",
    "ExportResult",
    "ScriptExporter",
    "new_script_text",
    "safe_filename",
]
