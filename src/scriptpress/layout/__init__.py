"""Pagination and layout of parsed scripts onto fixed-size pages."""

from scriptpress.layout.commands import (
    BLACK,
    GREY,
    Bookmark,
    DrawCommand,
    LayoutResult,
    Page,
)
from scriptpress.layout.engine import LayoutEngine
from scriptpress.layout.metrics import (
    FontMetrics,
    FontSet,
    FontStyle,
    MonospaceMetrics,
)

__all__ = [
    "BLACK",
    "GREY",
    "Bookmark",
    "DrawCommand",
    "FontMetrics",
    "FontSet",
    "FontStyle",
    "LayoutEngine",
    "LayoutResult",
    "MonospaceMetrics",
    "Page",
]
