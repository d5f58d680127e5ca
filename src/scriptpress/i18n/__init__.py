"""Localisation helpers: caption lookup, language detection and dates."""

from scriptpress.i18n.locale import (
    FALLBACK_LANGUAGE,
    Locale,
    detect_language,
    format_date,
)

__all__ = ["FALLBACK_LANGUAGE", "Locale", "detect_language", "format_date"]
