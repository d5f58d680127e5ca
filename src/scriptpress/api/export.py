"""Export API: script text to laid-out pages to a PDF file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from scriptpress.config import ScriptPressSettings, get_logger, get_settings
from scriptpress.i18n import Locale
from scriptpress.layout import FontSet, FontStyle, LayoutEngine, LayoutResult
from scriptpress.parser import ScriptMetadata, ScriptParser, encode
from scriptpress.parser.models import Script
from scriptpress.render import PdfRenderTarget, font_set, register_fonts, replay

logger = get_logger(__name__)

DEFAULT_FILE_STEM = "Untitled Script"
SCRIPT_SUFFIX = ".script"

_UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|]')


def safe_filename(name: str) -> str:
    """Replace characters that are not allowed in file names with ``-``."""
    return _UNSAFE_FILENAME_CHARS.sub("-", name).strip() or DEFAULT_FILE_STEM


def new_script_text(
    title: str,
    writers: str = "",
    prod_company: str = "",
    date: str = "",
) -> str:
    """Text of a freshly created script file: a frontmatter block only.

    Args:
        title: Script title
        writers: Comma separated writer names
        prod_company: Production company
        date: Date as written, usually ISO ``YYYY-MM-DD``

    Returns:
        Frontmatter block ready to be written to disk
    """
    return encode(
        ScriptMetadata(
            title=title,
            writers=writers,
            prod_company=prod_company,
            date=date,
        )
    )


@dataclass
class ExportResult:
    """Outcome of one PDF export."""

    output_path: Path
    title: str
    language: str
    page_count: int
    bookmark_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "output_path": str(self.output_path),
            "title": self.title,
            "language": self.language,
            "page_count": self.page_count,
            "bookmark_count": self.bookmark_count,
        }


class ScriptExporter:
    """Parse, lay out and render scripts to PDF.

    Fonts are registered with ReportLab lazily, on the first layout.
    """

    def __init__(self, settings: ScriptPressSettings | None = None) -> None:
        """Initialize the exporter.

        Args:
            settings: Configuration; global settings if omitted
        """
        self.settings = settings or get_settings()
        self.parser = ScriptParser()
        self._font_names: dict[FontStyle, str] | None = None

    @property
    def font_names(self) -> dict[FontStyle, str]:
        if self._font_names is None:
            self._font_names = register_fonts(self.settings)
        return self._font_names

    @property
    def fonts(self) -> FontSet:
        return font_set(self.font_names)

    def locale_for(self, script: Script) -> Locale:
        """Caption locale detected from the title, then the writers."""
        return Locale.for_text(
            script.title or script.writers,
            default=self.settings.default_language,
        )

    def layout(self, text: str) -> LayoutResult:
        """Parse script text and lay it out with the configured fonts."""
        return self.layout_script(self.parser.parse(text))

    def layout_script(self, script: Script) -> LayoutResult:
        engine = LayoutEngine(settings=self.settings, fonts=self.fonts)
        return engine.layout(script, locale=self.locale_for(script))

    def export(self, text: str, output_path: Path | str) -> ExportResult:
        """Render script text to a PDF file.

        Args:
            text: Full script text, frontmatter included
            output_path: Destination PDF path

        Returns:
            Summary of the written document

        Raises:
            RenderError: If fonts cannot be loaded or the PDF cannot be written
        """
        return self._write_pdf(self.layout(text), Path(output_path))

    def default_output_path(self, source: Path, title: str) -> Path:
        """``<title>.pdf`` beside the source file."""
        return source.parent / f"{safe_filename(title or DEFAULT_FILE_STEM)}.pdf"

    def export_file(
        self, source: Path | str, output_path: Path | str | None = None
    ) -> ExportResult:
        """Render a script file to PDF.

        Args:
            source: Script file to read
            output_path: Destination; defaults to the script title beside
                the source

        Returns:
            Summary of the written document

        Raises:
            ScriptPressFileNotFoundError: If the source does not exist
            ParseError: If the source is not UTF-8 text
            RenderError: If fonts cannot be loaded or the PDF cannot be written
        """
        source = Path(source)
        script = self.parser.parse_file(source)
        if output_path is None:
            output_path = self.default_output_path(source, script.title)
        return self._write_pdf(self.layout_script(script), Path(output_path))

    def _write_pdf(self, result: LayoutResult, path: Path) -> ExportResult:
        target = PdfRenderTarget(
            path,
            font_names=self.font_names,
            title=result.title,
            language=result.language,
        )
        replay(result, target)

        logger.info(
            "Exported script",
            output=str(path),
            pages=result.page_count,
            language=result.language,
        )
        return ExportResult(
            output_path=path,
            title=result.title,
            language=result.language,
            page_count=result.page_count,
            bookmark_count=len(result.bookmarks),
        )
