"""Data models for parsed screenplay documents."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import Any


@dataclass
class ScriptMetadata:
    """Title-page metadata carried in the frontmatter block.

    Every field is a plain string; an empty string means "absent". The date
    is kept exactly as written and only formatted at render time.
    """

    title: str = ""
    subtitle: str = ""
    writers: str = ""
    prod_company: str = ""
    date: str = ""
    character_folder: str = ""

    def is_empty(self) -> bool:
        """Return True when no field carries a value."""
        return not any(getattr(self, f.name) for f in fields(self))

    def writer_list(self) -> list[str]:
        """Split the writers field on commas into individual names."""
        return [name.strip() for name in self.writers.split(",") if name.strip()]


class ScriptElementType(Enum):
    """Closed set of screenplay element kinds."""

    SCENE_HEADING = "SceneHeading"
    ACTION = "Action"
    CHARACTER = "Character"
    DIALOGUE = "Dialogue"
    TRANSITION = "Transition"
    SUBHEADER = "Subheader"

    @property
    def is_long_form(self) -> bool:
        """Long-form elements may be split across a page boundary."""
        return self in (ScriptElementType.ACTION, ScriptElementType.DIALOGUE)


@dataclass(frozen=True)
class ScriptElement:
    """One classified line of screenplay content."""

    type: ScriptElementType
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type.value, "content": self.content}


@dataclass(frozen=True)
class SceneMarker:
    """A ``#`` line: the start of a new scene with the given heading."""

    heading: str


@dataclass
class Scene:
    """A scene and the elements that follow its heading.

    ``id`` is the 1-based scene number. The synthetic scene that collects
    content written before the first heading has ``id == 0`` and an empty
    heading.
    """

    id: int
    heading: str
    elements: list[ScriptElement] = field(default_factory=list)

    @property
    def is_numbered(self) -> bool:
        return self.id > 0

    @property
    def subtitle(self) -> str | None:
        """Content of a leading subheader, rendered as the scene sub-title."""
        if self.elements and self.elements[0].type is ScriptElementType.SUBHEADER:
            return self.elements[0].content
        return None

    @property
    def body_elements(self) -> list[ScriptElement]:
        """Elements rendered as body rows (the sub-title excluded)."""
        if self.subtitle is not None:
            return self.elements[1:]
        return list(self.elements)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "heading": self.heading,
            "elements": [element.to_dict() for element in self.elements],
        }


@dataclass
class Script:
    """A parsed screenplay: metadata plus scenes in document order."""

    metadata: ScriptMetadata = field(default_factory=ScriptMetadata)
    scenes: list[Scene] = field(default_factory=list)

    @property
    def title(self) -> str:
        return self.metadata.title

    @property
    def subtitle(self) -> str:
        return self.metadata.subtitle

    @property
    def writers(self) -> str:
        return self.metadata.writers

    @property
    def prod_company(self) -> str:
        return self.metadata.prod_company

    @property
    def date(self) -> str:
        return self.metadata.date

    @property
    def character_folder(self) -> str:
        return self.metadata.character_folder

    @property
    def numbered_scenes(self) -> list[Scene]:
        """Scenes that carry a heading and a scene number."""
        return [scene for scene in self.scenes if scene.is_numbered]

    @property
    def scene_number_width(self) -> int:
        """Digits needed to print the highest scene number."""
        return len(str(len(self.numbered_scenes))) if self.numbered_scenes else 1

    def scene_label(self, scene: Scene) -> str:
        """Zero-padded scene number, or an empty string for the synthetic scene."""
        if not scene.is_numbered:
            return ""
        return str(scene.id).zfill(self.scene_number_width)

    def characters(self) -> list[str]:
        """Distinct character cue names, upper-cased, in order of first appearance."""
        seen: dict[str, None] = {}
        for scene in self.scenes:
            for element in scene.elements:
                if element.type is ScriptElementType.CHARACTER and element.content:
                    seen.setdefault(element.content.upper(), None)
        return list(seen)

    def to_dict(self) -> dict[str, Any]:
        return {
            **asdict(self.metadata),
            "scenes": [scene.to_dict() for scene in self.scenes],
        }
