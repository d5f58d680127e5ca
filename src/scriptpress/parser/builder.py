"""Document builder: groups classified lines into numbered scenes."""

from __future__ import annotations

from scriptpress.parser.classifier import classify
from scriptpress.parser.frontmatter import decode
from scriptpress.parser.models import Scene, SceneMarker, Script

SYNTHETIC_SCENE_ID = 0


def build_scenes(body: str) -> list[Scene]:
    """Build the scene list for a script body.

    Blank lines are dropped before classification. Scenes opened by a
    ``#`` heading are numbered 1, 2, 3... in document order. Content that
    appears before the first heading goes into a synthetic scene with
    ``id == 0`` and an empty heading; it never takes a scene number, even
    when the body has no heading at all.

    Args:
        body: Script text without its frontmatter block

    Returns:
        Scenes in document order
    """
    scenes: list[Scene] = []
    current: Scene | None = None
    scene_counter = 1

    for raw_line in body.split("\n"):
        line = raw_line.strip()
        if not line:
            continue

        parsed = classify(line)
        if isinstance(parsed, SceneMarker):
            if current is not None:
                scenes.append(current)
            current = Scene(id=scene_counter, heading=parsed.heading)
            scene_counter += 1
        else:
            if current is None:
                current = Scene(id=SYNTHETIC_SCENE_ID, heading="")
            current.elements.append(parsed)

    if current is not None:
        scenes.append(current)

    return scenes


def parse_script(full_text: str) -> Script:
    """Parse full script text (frontmatter and body) into a Script."""
    metadata, body = decode(full_text)
    return Script(metadata=metadata, scenes=build_scenes(body))
