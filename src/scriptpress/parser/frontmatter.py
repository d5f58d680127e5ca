"""Frontmatter codec for the metadata block at the top of a script.

A script file may start with a block such as::

    ---
    title: The Long Night
    author: Dana Levi, Sam Ortiz
    date: 2024-05-01
    ---

followed by the screenplay body. ``decode`` never fails: text without a
leading block simply has empty metadata.
"""

from __future__ import annotations

import re

from scriptpress.parser.models import ScriptMetadata

FRONTMATTER_PATTERN = re.compile(
    r"\A---\r?\n(?P<inner>.*?)^---[ \t]*(?:\r?\n|\Z)",
    re.MULTILINE | re.DOTALL,
)

# frontmatter key (lower-cased) -> ScriptMetadata attribute
KEY_ALIASES: dict[str, str] = {
    "title": "title",
    "subtitle": "subtitle",
    "author": "writers",
    "writers": "writers",
    "prod_company": "prod_company",
    "date": "date",
    "characterfolder": "character_folder",
}

# (attribute, emitted key) in output order
ENCODE_ORDER: tuple[tuple[str, str], ...] = (
    ("title", "title"),
    ("subtitle", "subtitle"),
    ("writers", "author"),
    ("prod_company", "prod_company"),
    ("date", "date"),
    ("character_folder", "characterFolder"),
)

_SPECIAL_CHARS = frozenset(':#[]{}|\n\r')
_QUOTES = "\"'"
# Only the escapes _quote writes; any other backslash is literal text
_ESCAPE_PATTERN = re.compile(r'\\([\\"nr])')
_UNESCAPES = {"n": "\n", "r": "\r"}


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        inner = value[1:-1]
        if value[0] == '"':
            return _ESCAPE_PATTERN.sub(
                lambda m: _UNESCAPES.get(m.group(1), m.group(1)), inner
            )
        return inner
    return value


def _needs_quotes(value: str) -> bool:
    return (
        any(ch in _SPECIAL_CHARS for ch in value)
        or value != value.strip()
        or value[0] in _QUOTES
        or value[-1] in _QUOTES
    )


def _quote(value: str) -> str:
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f'"{escaped}"'


def parse_block(inner: str) -> ScriptMetadata:
    """Parse the ``key: value`` lines between the two ``---`` markers."""
    metadata = ScriptMetadata()
    for raw_line in inner.split("\n"):
        line = raw_line.rstrip("\r")
        key, sep, value = line.partition(":")
        if not sep:
            continue
        attribute = KEY_ALIASES.get(key.strip().lower())
        if attribute is None:
            continue
        setattr(metadata, attribute, _unquote(value.strip()))
    return metadata


def decode(full_text: str) -> tuple[ScriptMetadata, str]:
    """Split full script text into its metadata and body.

    Args:
        full_text: Entire file contents

    Returns:
        Tuple of (metadata, body). Without a leading block the metadata is
        empty and the body is the unchanged input.
    """
    match = FRONTMATTER_PATTERN.match(full_text)
    if match is None:
        return ScriptMetadata(), full_text
    return parse_block(match.group("inner")), full_text[match.end() :]


def encode(metadata: ScriptMetadata) -> str:
    """Serialize metadata to a frontmatter block.

    Only non-empty fields are written. Returns an empty string (no markers
    at all) when every field is empty.
    """
    lines = []
    for attribute, key in ENCODE_ORDER:
        value = getattr(metadata, attribute)
        if not value:
            continue
        lines.append(f"{key}: {_quote(value) if _needs_quotes(value) else value}")
    if not lines:
        return ""
    return "---\n" + "\n".join(lines) + "\n---\n"
