"""Locale value threaded through layout for captions and date formatting.

A ``Locale`` is immutable and created per export, so two exports running
side by side never share language state.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from scriptpress.config import get_logger
from scriptpress.i18n.translations import RTL_LANGUAGES, TRANSLATIONS

logger = get_logger(__name__)

FALLBACK_LANGUAGE = "en"

_HEBREW = re.compile("[\u0590-\u05ff]")
_ARABIC = re.compile(
    "[\u0600-\u06ff\u0750-\u077f\u08a0-\u08ff\ufb50-\ufdff\ufe70-\ufeff]"
)

# strftime-free patterns; {d}/{m} unpadded, {dd}/{mm} zero padded
DATE_PATTERNS: dict[str, str] = {
    "en": "{m}/{d}/{y}",
    "he": "{d}.{m}.{y}",
    "ar": "{d}/{m}/{y}",
    "es": "{d}/{m}/{y}",
    "fr": "{dd}/{mm}/{y}",
    "de": "{d}.{m}.{y}",
}


def detect_language(text: str) -> str:
    """Guess a language code from the script characters in text."""
    if _HEBREW.search(text):
        return "he"
    if _ARABIC.search(text):
        return "ar"
    return FALLBACK_LANGUAGE


def format_date(raw: str, language: str) -> str:
    """Format an ISO-like date string for the given language.

    Anything ``datetime.fromisoformat`` cannot read is returned unchanged.
    """
    value = raw.strip()
    try:
        parsed: date = datetime.fromisoformat(value).date()
    except ValueError:
        return raw
    pattern = DATE_PATTERNS.get(language, DATE_PATTERNS[FALLBACK_LANGUAGE])
    return pattern.format(
        d=parsed.day,
        m=parsed.month,
        dd=f"{parsed.day:02d}",
        mm=f"{parsed.month:02d}",
        y=parsed.year,
    )


@dataclass(frozen=True)
class Locale:
    """A resolved language for one render pass."""

    language: str = FALLBACK_LANGUAGE

    @classmethod
    def from_code(cls, code: str | None) -> Locale:
        """Build a locale from a code such as ``he`` or ``es-ES``.

        Codes with neither captions nor a date pattern fall back to English.
        """
        language = (code or "").strip().lower().replace("_", "-").split("-")[0]
        if language not in TRANSLATIONS and language not in DATE_PATTERNS:
            logger.warning(
                "Language not supported, falling back",
                language=code,
                fallback=FALLBACK_LANGUAGE,
            )
            language = FALLBACK_LANGUAGE
        return cls(language=language)

    @classmethod
    def for_text(cls, text: str, default: str = FALLBACK_LANGUAGE) -> Locale:
        """Locale detected from text, or ``default`` when nothing is detected."""
        detected = detect_language(text)
        if detected == FALLBACK_LANGUAGE:
            return cls.from_code(default)
        return cls(language=detected)

    @property
    def is_rtl(self) -> bool:
        return self.language in RTL_LANGUAGES

    def t(self, key: str) -> str:
        """Look up a dotted translation key, e.g. ``pdf.writtenBy``.

        Falls back to English, then to the key itself.
        """
        for language in (self.language, FALLBACK_LANGUAGE):
            value = _lookup(TRANSLATIONS.get(language, {}), key)
            if isinstance(value, str):
                return value
        logger.warning("Translation key not found", key=key, language=self.language)
        return key

    def format_date(self, raw: str) -> str:
        return format_date(raw, self.language)


def _lookup(table: dict[str, Any], key: str) -> Any:
    value: Any = table
    for part in key.split("."):
        if not isinstance(value, dict) or part not in value:
            return None
        value = value[part]
    return value
