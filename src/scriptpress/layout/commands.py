"""Positioned output of the layout engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from scriptpress.layout.metrics import FontStyle
from scriptpress.utils.direction import Alignment, TextDirection

Color = tuple[float, float, float]

BLACK: Color = (0.0, 0.0, 0.0)
GREY: Color = (0.2, 0.2, 0.2)


@dataclass(frozen=True)
class DrawCommand:
    """Draw one line of text with its left edge at ``x`` and baseline at ``y``.

    Text is already shaped for its direction; ``align`` records how ``x``
    was derived. ``direction`` belongs to the element the line came from, so
    a Latin-only line wrapped out of a Hebrew paragraph is still RTL.
    """

    text: str
    x: float
    y: float
    font: FontStyle
    size: float
    color: Color = BLACK
    align: Alignment = Alignment.LEFT
    direction: TextDirection = TextDirection.LTR

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "x": round(self.x, 2),
            "y": round(self.y, 2),
            "font": self.font.value,
            "size": self.size,
            "color": list(self.color),
            "align": self.align.value,
            "direction": self.direction.value,
        }


@dataclass
class Page:
    """One output page and the commands drawn on it, in order."""

    index: int
    width: float
    height: float
    commands: list[DrawCommand] = field(default_factory=list)

    @property
    def texts(self) -> list[str]:
        return [command.text for command in self.commands]

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "width": self.width,
            "height": self.height,
            "commands": [command.to_dict() for command in self.commands],
        }


@dataclass(frozen=True)
class Bookmark:
    """Outline entry pointing at the page where a scene starts."""

    title: str
    page_index: int

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "page_index": self.page_index}


@dataclass
class LayoutResult:
    """Pages and bookmarks produced for one script."""

    pages: list[Page]
    bookmarks: list[Bookmark]
    language: str
    title: str = ""

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "language": self.language,
            "pages": [page.to_dict() for page in self.pages],
            "bookmarks": [bookmark.to_dict() for bookmark in self.bookmarks],
        }
