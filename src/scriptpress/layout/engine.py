"""Pagination and layout engine.

Projects a parsed Script onto fixed-size pages. Coordinates follow PDF
conventions: the origin is the bottom-left corner and the cursor starts at
``page_height - margin`` and moves down as lines are emitted.

The engine never mutates the Script it is given. When a long element is
split across pages the unrendered remainder is a local string, so one
parsed script can be laid out any number of times.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from scriptpress.config import ScriptPressSettings, get_logger, get_settings
from scriptpress.i18n import Locale
from scriptpress.layout.commands import (
    BLACK,
    GREY,
    Bookmark,
    Color,
    DrawCommand,
    LayoutResult,
    Page,
)
from scriptpress.layout.metrics import FontSet, FontStyle
from scriptpress.parser.models import Scene, Script, ScriptElement, ScriptElementType
from scriptpress.utils.direction import (
    Alignment,
    TextDirection,
    alignment_for,
    direction,
    is_rtl,
    position_x,
    shape,
)

logger = get_logger(__name__)

# Title page geometry, relative to the title baseline
TITLE_BLOCK_SPACING = 50.0
CREDIT_LINE_SPACING = 15.0
WRITERS_BLOCK_GAP = 35.0
SUBTITLE_SCALE = 0.5
CREDIT_SCALE = 0.8

# Font face per element type; anything missing is regular
ELEMENT_FONTS: dict[ScriptElementType, FontStyle] = {
    ScriptElementType.SCENE_HEADING: FontStyle.BOLD,
    ScriptElementType.CHARACTER: FontStyle.BOLD,
    ScriptElementType.SUBHEADER: FontStyle.BOLD,
}

UPPERCASE_ELEMENTS = frozenset(
    {
        ScriptElementType.SCENE_HEADING,
        ScriptElementType.CHARACTER,
        ScriptElementType.TRANSITION,
    }
)


@dataclass
class _LayoutState:
    """Mutable cursor state for a single layout pass."""

    pages: list[Page] = field(default_factory=list)
    bookmarks: list[Bookmark] = field(default_factory=list)
    cursor_y: float = 0.0

    @property
    def page(self) -> Page:
        return self.pages[-1]


class LayoutEngine:
    """Lay out scripts onto pages using injected font metrics.

    Args:
        settings: Page geometry and typography; global settings if omitted
        fonts: Metric providers for the regular and bold faces
        locale: Caption language; detected from each script if omitted
    """

    def __init__(
        self,
        settings: ScriptPressSettings | None = None,
        fonts: FontSet | None = None,
        locale: Locale | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.fonts = fonts or FontSet()
        self.locale = locale

    # -- geometry ---------------------------------------------------------

    def check_page_break(self, y: float) -> bool:
        """True when a line at ``y`` would fall into the bottom margin."""
        return y < self.settings.margin

    def remaining_lines(self, y: float) -> int:
        """Number of lines that fit from ``y`` down to the bottom margin."""
        if self.check_page_break(y):
            return 0
        usable = y - self.settings.margin
        return math.floor(usable / self.settings.line_spacing) + 1

    def wrap_text(
        self,
        text: str,
        width: float,
        font: FontStyle = FontStyle.REGULAR,
        size: float | None = None,
    ) -> list[str]:
        """Greedy word wrap on single spaces.

        A word wider than ``width`` is never broken; it sits alone on its
        own line.
        """
        size = size or self.settings.default_font_size
        lines: list[str] = []
        current = ""

        for word in text.split(" "):
            candidate = f"{current} {word}" if current else word
            if self.fonts.width(candidate, font, size) <= width:
                current = candidate
            else:
                if current:
                    lines.append(current)
                current = word

        if current:
            lines.append(current)
        return lines

    # -- entry point ------------------------------------------------------

    def layout(self, script: Script, locale: Locale | None = None) -> LayoutResult:
        """Lay out the title page and every scene of a script.

        Args:
            script: Parsed script; left untouched
            locale: Overrides the engine locale for this call

        Returns:
            Pages (title page first) and scene bookmarks
        """
        locale = (
            locale
            or self.locale
            or Locale.for_text(
                script.title or script.writers,
                default=self.settings.default_language,
            )
        )
        state = _LayoutState()

        self._new_page(state)
        self._render_title_page(state, script, locale)

        self._new_page(state)
        for scene in script.scenes:
            self._render_scene(state, scene)
        if not state.page.commands:
            # A script without body content gets only its title page
            state.pages.pop()

        logger.debug(
            "Laid out script",
            title=script.title,
            pages=len(state.pages),
            bookmarks=len(state.bookmarks),
            language=locale.language,
        )
        return LayoutResult(
            pages=state.pages,
            bookmarks=state.bookmarks,
            language=locale.language,
            title=script.title,
        )

    # -- page handling ----------------------------------------------------

    def _new_page(self, state: _LayoutState) -> None:
        state.pages.append(
            Page(
                index=len(state.pages),
                width=self.settings.page_width,
                height=self.settings.page_height,
            )
        )
        state.cursor_y = self.settings.top_y

    def _break_page(self, state: _LayoutState) -> None:
        """Move to the top of a new page; an untouched page is reused."""
        if state.page.commands:
            self._new_page(state)
        else:
            state.cursor_y = self.settings.top_y

    def _ensure_room(self, state: _LayoutState, lines: int = 1) -> None:
        """Break the page unless ``lines`` lines fit at the cursor."""
        if self.remaining_lines(state.cursor_y) < lines:
            self._break_page(state)

    def _draw(
        self,
        state: _LayoutState,
        text: str,
        x: float,
        font: FontStyle,
        size: float,
        color: Color = BLACK,
        align: Alignment = Alignment.LEFT,
        y: float | None = None,
        text_direction: TextDirection | None = None,
    ) -> None:
        state.page.commands.append(
            DrawCommand(
                text=text,
                x=x,
                y=state.cursor_y if y is None else y,
                font=font,
                size=size,
                color=color,
                align=align,
                direction=text_direction or direction(text),
            )
        )

    def _draw_centered(
        self,
        state: _LayoutState,
        text: str,
        y: float,
        font: FontStyle,
        size: float,
        color: Color = BLACK,
    ) -> None:
        shaped = shape(text)
        width = self.fonts.width(shaped, font, size)
        x = position_x(Alignment.CENTER, width, self.settings.page_width)
        self._draw(state, shaped, x, font, size, color, Alignment.CENTER, y=y)

    # -- title page -------------------------------------------------------

    def _render_title_page(
        self, state: _LayoutState, script: Script, locale: Locale
    ) -> None:
        s = self.settings
        y = s.page_height / 2 + TITLE_BLOCK_SPACING

        title = script.title or locale.t("pdf.untitled")
        self._draw_centered(state, title, y, FontStyle.BOLD, s.title_font_size)

        if script.subtitle:
            y -= TITLE_BLOCK_SPACING / 2
            self._draw_centered(
                state,
                script.subtitle,
                y,
                FontStyle.REGULAR,
                s.title_font_size * SUBTITLE_SCALE,
                GREY,
            )

        y -= TITLE_BLOCK_SPACING
        writers = script.metadata.writer_list() or [locale.t("pdf.unknownWriter")]
        self._render_credit(state, locale.t("pdf.writtenBy"), writers, y)
        y -= CREDIT_LINE_SPACING * len(writers) + WRITERS_BLOCK_GAP

        if script.prod_company:
            self._render_credit(
                state, locale.t("pdf.producedBy"), [script.prod_company], y
            )
            y -= TITLE_BLOCK_SPACING

        if script.date:
            self._render_credit(
                state, locale.t("pdf.date"), [locale.format_date(script.date)], y
            )

    def _render_credit(
        self, state: _LayoutState, caption: str, lines: list[str], y: float
    ) -> None:
        """A centred caption with one centred line per entry beneath it."""
        size = self.settings.subtitle_font_size
        self._draw_centered(state, caption, y, FontStyle.REGULAR, size)
        for line in lines:
            y -= CREDIT_LINE_SPACING
            self._draw_centered(
                state, line, y, FontStyle.REGULAR, size * CREDIT_SCALE, GREY
            )

    # -- scenes -----------------------------------------------------------

    def _render_scene(self, state: _LayoutState, scene: Scene) -> None:
        state.cursor_y -= self.settings.scene_spacing
        subtitle = scene.subtitle

        if scene.is_numbered:
            # Heading and sub-title stay together
            self._ensure_room(state, 2 if subtitle is not None else 1)
            self._render_scene_heading(state, scene)
            state.bookmarks.append(
                Bookmark(title=scene.heading, page_index=state.page.index)
            )

        if subtitle is not None:
            self._ensure_room(state)
            self._render_line(
                state,
                subtitle,
                ScriptElementType.SUBHEADER,
                FontStyle.REGULAR,
                color=GREY,
            )

        for element in scene.body_elements:
            self._render_element(state, element)

    def _render_scene_heading(self, state: _LayoutState, scene: Scene) -> None:
        s = self.settings
        size = s.default_font_size
        number = str(scene.id)
        number_width = self.fonts.width(number, FontStyle.BOLD, size)
        rtl = is_rtl(scene.heading)

        left_gutter_x = s.margin - number_width - s.scene_number_padding
        right_gutter_x = s.page_width - s.margin + s.scene_number_padding
        if s.scene_numbers_both_margins or not rtl:
            self._draw(state, number, left_gutter_x, FontStyle.BOLD, size)
        if s.scene_numbers_both_margins or rtl:
            self._draw(state, number, right_gutter_x, FontStyle.BOLD, size)

        self._render_line(
            state, scene.heading, ScriptElementType.SCENE_HEADING, FontStyle.BOLD
        )

    # -- elements ---------------------------------------------------------

    def _render_element(self, state: _LayoutState, element: ScriptElement) -> None:
        if element.type.is_long_form:
            self._render_long_form(state, element)
            return

        self._ensure_room(state)
        self._render_line(
            state,
            element.content,
            element.type,
            ELEMENT_FONTS.get(element.type, FontStyle.REGULAR),
        )

    def _render_line(
        self,
        state: _LayoutState,
        content: str,
        element_type: ScriptElementType,
        font: FontStyle,
        color: Color = BLACK,
    ) -> None:
        """Draw a short-form element as one unwrapped line and advance."""
        size = self.settings.default_font_size
        text = content.upper() if element_type in UPPERCASE_ELEMENTS else content
        shaped = shape(text)
        width = self.fonts.width(shaped, font, size)
        alignment = alignment_for(element_type, content)
        x = position_x(alignment, width, self.settings.page_width, self.settings.margin)
        self._draw(state, shaped, x, font, size, color, alignment)
        state.cursor_y -= self.settings.line_spacing

    def _render_long_form(self, state: _LayoutState, element: ScriptElement) -> None:
        """Wrap an action or dialogue and split it across pages as needed."""
        s = self.settings
        size = s.default_font_size
        content = element.content
        dialogue = element.type is ScriptElementType.DIALOGUE

        centered = False
        if dialogue and s.center_quoted_dialogue and content.startswith('"'):
            content = content[1:].strip()
            centered = True

        text_direction = direction(content)
        rtl = text_direction is TextDirection.RTL
        width = s.dialogue_width if dialogue else s.text_width
        alignment = (
            Alignment.CENTER if centered else alignment_for(element.type, content)
        )

        # Wrapping works on logical text; each drawn line is shaped on its own
        remaining = content
        while remaining:
            lines = self.wrap_text(remaining, width, FontStyle.REGULAR, size)
            room = self.remaining_lines(state.cursor_y)
            if room == 0:
                self._break_page(state)
                room = max(self.remaining_lines(state.cursor_y), 1)

            for line in lines[:room]:
                shaped = shape(line)
                line_width = self.fonts.width(shaped, FontStyle.REGULAR, size)
                if centered:
                    x = position_x(Alignment.CENTER, line_width, s.page_width)
                elif dialogue:
                    x = (
                        (s.page_width + width) / 2 - line_width
                        if rtl
                        else (s.page_width - width) / 2
                    )
                else:
                    x = position_x(alignment, line_width, s.page_width, s.margin)
                self._draw(
                    state,
                    shaped,
                    x,
                    FontStyle.REGULAR,
                    size,
                    BLACK,
                    alignment,
                    text_direction=text_direction,
                )
                state.cursor_y -= s.line_spacing

            remaining = " ".join(lines[room:])
            if remaining:
                self._break_page(state)
