"""ScriptPress: screenplay markup to paginated, bidirectional PDF.

ScriptPress parses plain-text screenplays with a ``---`` frontmatter block
into scenes and elements, lays them out on fixed-size pages with
left-to-right and right-to-left rules, and renders the result to PDF.
"""

from pathlib import Path

from .api import ExportResult, ScriptExporter, new_script_text
from .config import ScriptPressSettings, get_logger, get_settings
from .exceptions import ScriptPressError
from .layout import LayoutEngine, LayoutResult
from .parser import Script, ScriptParser

__version__ = "0.1.0"

__all__ = [
    "ExportResult",
    "LayoutEngine",
    "LayoutResult",
    "Script",
    "ScriptExporter",
    "ScriptParser",
    "ScriptPress",
    "ScriptPressError",
    "ScriptPressSettings",
    "__version__",
    "get_settings",
    "new_script_text",
]


class ScriptPress:
    """Main ScriptPress interface."""

    def __init__(
        self,
        config: ScriptPressSettings | None = None,
        config_file: Path | None = None,
    ) -> None:
        """Initialize ScriptPress with configuration.

        Args:
            config: Settings object to use as-is
            config_file: Configuration file to load when no settings are given
        """
        if config:
            self.config = config
        elif config_file:
            self.config = ScriptPressSettings.from_multiple_sources(
                config_files=[config_file]
            )
        else:
            self.config = get_settings()

        self.logger = get_logger(__name__)
        self.parser = ScriptParser()
        self.exporter = ScriptExporter(self.config)

    def parse(self, text: str) -> Script:
        return self.parser.parse(text)

    def parse_file(self, path: Path | str) -> Script:
        return self.parser.parse_file(path)

    def layout(self, text: str) -> LayoutResult:
        return self.exporter.layout(text)

    def export_file(
        self, source: Path | str, output_path: Path | str | None = None
    ) -> ExportResult:
        """Render a script file to PDF; see ``ScriptExporter.export_file``."""
        self.logger.info("Exporting screenplay", source=str(source))
        return self.exporter.export_file(source, output_path)
