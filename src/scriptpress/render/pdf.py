"""ReportLab PDF render target and font metrics.

ReportLab draws strings as given with no bidi support, so lines from RTL
elements are put into visual order here before ``drawString``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont
from reportlab.pdfgen import canvas

from scriptpress.config import ScriptPressSettings, get_logger
from scriptpress.exceptions import RenderError
from scriptpress.layout.commands import Color
from scriptpress.layout.metrics import FontSet, FontStyle
from scriptpress.utils.direction import TextDirection, is_rtl, visual_order

logger = get_logger(__name__)

# Standard Type 1 faces every PDF viewer ships
BUILTIN_FONTS: dict[FontStyle, str] = {
    FontStyle.REGULAR: "Helvetica",
    FontStyle.BOLD: "Helvetica-Bold",
}

EMBEDDED_FONT_PREFIX = "ScriptPress"


@dataclass(frozen=True)
class ReportLabMetrics:
    """Width provider backed by a font registered with ReportLab."""

    font_name: str

    def width_of_text_at_size(self, text: str, size: float) -> float:
        return pdfmetrics.stringWidth(text, self.font_name, size)


def register_fonts(settings: ScriptPressSettings) -> dict[FontStyle, str]:
    """Register the configured TrueType fonts and return their names by style.

    Styles without a configured path use the built-in Helvetica faces.

    Raises:
        RenderError: If a configured font file is missing or unreadable
    """
    paths = {
        FontStyle.REGULAR: settings.regular_font_path,
        FontStyle.BOLD: settings.bold_font_path,
    }
    names = dict(BUILTIN_FONTS)

    for style, path in paths.items():
        if path is None:
            continue
        name = f"{EMBEDDED_FONT_PREFIX}-{style.value}"
        if not Path(path).is_file():
            raise RenderError(
                message=f"Font file not found: {path}",
                hint="Point the font setting at an existing .ttf file",
                details={"style": style.value, "path": str(path)},
            )
        try:
            pdfmetrics.registerFont(TTFont(name, str(path)))
        except (TTFError, OSError) as e:
            raise RenderError(
                message=f"Could not load font {path}",
                hint="Only TrueType (.ttf) fonts can be embedded",
                details={"style": style.value, "error": str(e)},
            ) from e
        logger.debug("Registered font", style=style.value, path=str(path), name=name)
        names[style] = name

    return names


def font_set(names: dict[FontStyle, str]) -> FontSet:
    """Metrics for already registered fonts, keyed by style."""
    return FontSet(
        regular=ReportLabMetrics(names[FontStyle.REGULAR]),
        bold=ReportLabMetrics(names[FontStyle.BOLD]),
    )


def load_fonts(settings: ScriptPressSettings) -> FontSet:
    """Font metrics for the faces the PDF renderer will draw with."""
    return font_set(register_fonts(settings))


class PdfRenderTarget:
    """Render target writing a PDF file through a ReportLab canvas.

    Args:
        output_path: Destination PDF file
        font_names: Registered ReportLab font name per style
        title: Document title stored in the PDF metadata
        language: Document language code
    """

    def __init__(
        self,
        output_path: Path,
        font_names: dict[FontStyle, str] | None = None,
        title: str = "",
        language: str = "en",
    ) -> None:
        self.output_path = Path(output_path)
        self.font_names = font_names or dict(BUILTIN_FONTS)
        self.title = title
        self.language = language
        self.page_count = 0
        self._canvas: canvas.Canvas | None = None
        self._bookmark_count = 0

    def _require_canvas(self) -> canvas.Canvas:
        if self._canvas is None:
            raise RenderError(
                message="No page has been added to the PDF yet",
                hint="Call add_page before drawing",
            )
        return self._canvas

    def add_page(self, width: float, height: float) -> None:
        if self._canvas is None:
            self._canvas = canvas.Canvas(
                str(self.output_path),
                pagesize=(width, height),
                lang=self.language,
            )
            if self.title:
                self._canvas.setTitle(self.title)
            self._canvas.setCreator("ScriptPress")
        else:
            self._canvas.showPage()
            self._canvas.setPageSize((width, height))
        self.page_count += 1

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        font: FontStyle,
        size: float,
        color: Color,
        direction: TextDirection | None = None,
    ) -> None:
        """Draw one shaped line.

        Without an explicit direction the line is RTL if it contains RTL
        letters.
        """
        c = self._require_canvas()
        if direction is TextDirection.RTL or (direction is None and is_rtl(text)):
            text = visual_order(text)
        c.setFont(self.font_names[font], size)
        c.setFillColorRGB(*color)
        c.drawString(x, y, text)

    def add_bookmark(self, title: str, page_index: int) -> None:
        """Add an outline entry for the current page.

        ``page_index`` must be the page most recently added.
        """
        c = self._require_canvas()
        if page_index != self.page_count - 1:
            raise RenderError(
                message=f"Bookmark '{title}' targets page {page_index}",
                hint="Bookmarks must be added while their page is current",
                details={"current_page": self.page_count - 1},
            )
        key = f"scene-{self._bookmark_count}"
        self._bookmark_count += 1
        c.bookmarkPage(key)
        c.addOutlineEntry(title, key, level=0)

    def finish(self) -> None:
        c = self._require_canvas()
        if self._bookmark_count:
            c.showOutline()
        try:
            c.save()
        except OSError as e:
            raise RenderError(
                message=f"Could not write PDF to {self.output_path}",
                hint="Check that the output directory exists and is writable",
                details={"error": str(e)},
            ) from e
        logger.info(
            "Wrote PDF",
            path=str(self.output_path),
            pages=self.page_count,
            bookmarks=self._bookmark_count,
        )
