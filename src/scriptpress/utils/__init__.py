"""ScriptPress utilities module."""

from scriptpress.utils.direction import (
    Alignment,
    TextDirection,
    alignment_for,
    direction,
    is_rtl,
    mirror_brackets,
    position_x,
    reverse_embedded_digits,
    shape,
    visual_order,
)

__all__ = [
    "Alignment",
    "TextDirection",
    "alignment_for",
    "direction",
    "is_rtl",
    "mirror_brackets",
    "position_x",
    "reverse_embedded_digits",
    "shape",
    "visual_order",
]
