"""Text direction detection and RTL shaping helpers.

Renderers that draw RTL text by reversing the whole run (instead of
applying the Unicode bidi algorithm) get digit runs and bracket pairs
backwards. ``shape`` pre-compensates for that: digit runs are reversed and
bracket pairs swapped, so a full reversal yields the correct visual order
for lines of pure RTL text. ``visual_order`` serves renderers that need the
exact order for mixed lines; it undoes the shaping and runs the Unicode
bidi algorithm from python-bidi.
"""

from __future__ import annotations

import re
from enum import Enum

from bidi.algorithm import get_display

from scriptpress.parser.models import ScriptElementType

RTL_RANGES: tuple[tuple[int, int], ...] = (
    (0x0590, 0x05FF),  # Hebrew
    (0x0600, 0x06FF),  # Arabic
    (0x0700, 0x074F),  # Syriac
    (0x0750, 0x077F),  # Arabic Supplement
    (0x0780, 0x07BF),  # Thaana
    (0x08A0, 0x08FF),  # Arabic Extended-A
    (0xFB50, 0xFDFF),  # Arabic Presentation Forms-A
    (0xFE70, 0xFEFF),  # Arabic Presentation Forms-B
)

_RTL_PATTERN = re.compile(
    "[" + "".join(f"\\u{lo:04x}-\\u{hi:04x}" for lo, hi in RTL_RANGES) + "]"
)
_DIGIT_RUN = re.compile(r"[0-9]+")

# One pattern per bracket kind; matches a pair in either orientation so
# mirroring twice gives back the original text.
_BRACKET_PATTERNS = tuple(
    re.compile(
        rf"{re.escape(o)}([^{re.escape(o + c)}]+){re.escape(c)}"
        rf"|{re.escape(c)}([^{re.escape(o + c)}]+){re.escape(o)}"
    )
    for o, c in (("(", ")"), ("[", "]"), ("{", "}"))
)


class TextDirection(str, Enum):
    """Reading direction of a run of text."""

    LTR = "ltr"
    RTL = "rtl"


class Alignment(str, Enum):
    """Horizontal alignment of a drawn line."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


def is_rtl(text: str) -> bool:
    """Return True if text contains any right-to-left script character."""
    return bool(text) and _RTL_PATTERN.search(text) is not None


def direction(text: str) -> TextDirection:
    return TextDirection.RTL if is_rtl(text) else TextDirection.LTR


def mirror_brackets(text: str) -> str:
    """Swap single-level ``()``, ``[]`` and ``{}`` pairs in RTL text.

    ``(x)`` becomes ``)x(`` and ``)x(`` becomes ``(x)``. LTR text is
    returned unchanged.
    """
    if not is_rtl(text):
        return text

    for pattern in _BRACKET_PATTERNS:
        text = pattern.sub(_swap_pair, text)
    return text


def _swap_pair(match: re.Match[str]) -> str:
    whole = match.group(0)
    return whole[-1] + whole[1:-1] + whole[0]


def reverse_embedded_digits(text: str) -> str:
    """Reverse every run of ASCII digits in RTL text; LTR text is unchanged."""
    if not is_rtl(text):
        return text
    return _DIGIT_RUN.sub(lambda m: m.group(0)[::-1], text)


def shape(text: str) -> str:
    """Prepare text for drawing: digit reversal then bracket mirroring for RTL."""
    if not is_rtl(text):
        return text
    return mirror_brackets(reverse_embedded_digits(text))


def visual_order(shaped: str, paragraph: TextDirection = TextDirection.RTL) -> str:
    """Left-to-right drawing order of one shaped line.

    ``shape`` is its own inverse, so applying it again restores logical order
    before the bidi algorithm reorders runs and mirrors brackets. The
    paragraph direction decides where neutral characters at the line ends
    go, which matters for wrapped lines with no RTL letters of their own.

    Args:
        shaped: A line as produced by ``shape``
        paragraph: Direction of the element the line belongs to

    Returns:
        The characters in the order they appear on the page
    """
    if not shaped:
        return shaped
    base_dir = "R" if paragraph is TextDirection.RTL else "L"
    return get_display(shape(shaped), base_dir=base_dir)


def alignment_for(element_type: ScriptElementType, text: str) -> Alignment:
    """Alignment of an element's lines given the direction of its text.

    Transitions sit opposite the reading direction; character cues are
    always centred.
    """
    rtl = is_rtl(text)
    if element_type is ScriptElementType.CHARACTER:
        return Alignment.CENTER
    if element_type is ScriptElementType.TRANSITION:
        return Alignment.LEFT if rtl else Alignment.RIGHT
    return Alignment.RIGHT if rtl else Alignment.LEFT


def position_x(
    alignment: Alignment,
    text_width: float,
    container_width: float,
    margin: float = 0.0,
) -> float:
    """Left edge of a line of the given width inside a container."""
    if alignment is Alignment.RIGHT:
        return container_width - margin - text_width
    if alignment is Alignment.CENTER:
        return (container_width - text_width) / 2
    return margin
