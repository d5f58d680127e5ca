"""Render targets that turn a layout into output."""

from scriptpress.render.base import RenderTarget, replay
from scriptpress.render.pdf import (
    PdfRenderTarget,
    ReportLabMetrics,
    font_set,
    load_fonts,
    register_fonts,
)

__all__ = [
    "PdfRenderTarget",
    "RenderTarget",
    "ReportLabMetrics",
    "font_set",
    "load_fonts",
    "register_fonts",
    "replay",
]
