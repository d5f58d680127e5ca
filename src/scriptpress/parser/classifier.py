"""Line classifier: maps one source line to an element or a scene marker."""

from __future__ import annotations

from scriptpress.parser.models import ScriptElement, ScriptElementType, SceneMarker

# Checked in order; "##" must be tested before "#".
SIGILS: tuple[tuple[str, ScriptElementType | None], ...] = (
    ("##", ScriptElementType.SUBHEADER),
    ("#", None),
    ("@", ScriptElementType.CHARACTER),
    ('"', ScriptElementType.DIALOGUE),
    ("-", ScriptElementType.TRANSITION),
)


def classify(line: str) -> ScriptElement | SceneMarker:
    """Classify a single line by its leading sigil.

    The sigil is stripped and the remainder trimmed. Lines without a sigil
    are actions. ``None`` in ``SIGILS`` marks the scene-heading sigil.

    Args:
        line: One line of script body text

    Returns:
        A ScriptElement, or a SceneMarker for ``#`` lines
    """
    text = line.strip()
    for sigil, element_type in SIGILS:
        if text.startswith(sigil):
            content = text[len(sigil) :].strip()
            if element_type is None:
                return SceneMarker(heading=content)
            return ScriptElement(type=element_type, content=content)
    return ScriptElement(type=ScriptElementType.ACTION, content=text)
