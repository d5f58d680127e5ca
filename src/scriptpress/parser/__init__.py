"""Screenplay markup parser for ScriptPress."""

from __future__ import annotations

from .builder import build_scenes, parse_script
from .classifier import classify
from .frontmatter import decode, encode
from .models import (
    Scene,
    SceneMarker,
    Script,
    ScriptElement,
    ScriptElementType,
    ScriptMetadata,
)
from .script_parser import ScriptParser

__all__ = [
    "Scene",
    "SceneMarker",
    "Script",
    "ScriptElement",
    "ScriptElementType",
    "ScriptMetadata",
    "ScriptParser",
    "build_scenes",
    "classify",
    "decode",
    "encode",
    "parse_script",
]
