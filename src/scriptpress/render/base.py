"""Render target contract and the replay loop that drives it."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from scriptpress.config import get_logger
from scriptpress.layout.commands import Color, LayoutResult
from scriptpress.layout.metrics import FontStyle
from scriptpress.utils.direction import TextDirection

logger = get_logger(__name__)


@runtime_checkable
class RenderTarget(Protocol):
    """Anything that can receive laid-out pages.

    Calls arrive in page order: ``add_page`` opens a page, the following
    ``draw_text`` and ``add_bookmark`` calls apply to it, and ``finish`` is
    called exactly once at the end. ``draw_text`` receives shaped text and
    the direction of the element it belongs to.
    """

    def add_page(self, width: float, height: float) -> None: ...

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        font: FontStyle,
        size: float,
        color: Color,
        direction: TextDirection | None = None,
    ) -> None: ...

    def add_bookmark(self, title: str, page_index: int) -> None: ...

    def finish(self) -> None: ...


def replay(layout: LayoutResult, target: RenderTarget) -> None:
    """Feed every page, draw command and bookmark of a layout into a target.

    Args:
        layout: Result of a layout pass
        target: Receiver of the draw calls
    """
    bookmarks_by_page: dict[int, list[str]] = {}
    for bookmark in layout.bookmarks:
        bookmarks_by_page.setdefault(bookmark.page_index, []).append(bookmark.title)

    for page in layout.pages:
        target.add_page(page.width, page.height)
        for command in page.commands:
            target.draw_text(
                command.text,
                command.x,
                command.y,
                command.font,
                command.size,
                command.color,
                direction=command.direction,
            )
        for title in bookmarks_by_page.get(page.index, []):
            target.add_bookmark(title, page.index)

    target.finish()
    logger.debug(
        "Replayed layout",
        pages=layout.page_count,
        bookmarks=len(layout.bookmarks),
        target=type(target).__name__,
    )
