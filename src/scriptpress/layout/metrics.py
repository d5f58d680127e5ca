"""Font metric providers used by the layout engine.

The engine only ever asks a font how wide a string is at a given size.
Anything with a ``width_of_text_at_size`` method will do: the ReportLab
renderer supplies real TrueType metrics, ``MonospaceMetrics`` gives
Courier-style fixed advances.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable


class FontStyle(str, Enum):
    """Logical font faces a draw command can ask for."""

    REGULAR = "Regular"
    BOLD = "Bold"


@runtime_checkable
class FontMetrics(Protocol):
    """Width provider for one font face."""

    def width_of_text_at_size(self, text: str, size: float) -> float:
        """Advance width of text set at size, in points."""
        ...


@dataclass(frozen=True)
class MonospaceMetrics:
    """Fixed advance per character, as a fraction of the font size.

    The default of 0.6 em matches Courier, the traditional screenplay face.
    """

    advance: float = 0.6

    def width_of_text_at_size(self, text: str, size: float) -> float:
        return len(text) * size * self.advance


@dataclass(frozen=True)
class FontSet:
    """The regular and bold faces used for one layout pass."""

    regular: FontMetrics = field(default_factory=MonospaceMetrics)
    bold: FontMetrics = field(default_factory=MonospaceMetrics)

    def get(self, style: FontStyle) -> FontMetrics:
        return self.bold if style is FontStyle.BOLD else self.regular

    def width(self, text: str, style: FontStyle, size: float) -> float:
        return self.get(style).width_of_text_at_size(text, size)
