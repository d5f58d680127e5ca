"""Caption and notice strings per supported language."""

from __future__ import annotations

from typing import Any

TRANSLATIONS: dict[str, dict[str, Any]] = {
    "en": {
        "pdf": {
            "writtenBy": "written by",
            "producedBy": "produced by",
            "date": "date",
            "untitled": "Untitled Script",
            "unknownWriter": "Unknown Writer",
        },
        "notices": {
            "exportSuccess": "Script exported to PDF successfully.",
            "exportFailed": "Failed to export script",
        },
    },
    "he": {
        "pdf": {
            "writtenBy": "נכתב על ידי",
            "producedBy": "הופק על ידי",
            "date": "תאריך",
            "untitled": "תסריט ללא שם",
            "unknownWriter": "כותב לא ידוע",
        },
        "notices": {
            "exportSuccess": "התסריט יוצא לPDF בהצלחה.",
            "exportFailed": "נכשל ייצוא התסריט",
        },
    },
    "es": {
        "pdf": {
            "writtenBy": "escrito por",
            "producedBy": "producido por",
            "date": "fecha",
            "untitled": "Guión sin título",
            "unknownWriter": "Escritor desconocido",
        },
        "notices": {
            "exportSuccess": "Guión exportado a PDF exitosamente.",
            "exportFailed": "Error al exportar guión",
        },
    },
    "ar": {
        "pdf": {
            "writtenBy": "تأليف",
            "producedBy": "إنتاج",
            "date": "التاريخ",
            "unknownWriter": "كاتب غير معروف",
        },
    },
}

# Languages whose captions read right to left
RTL_LANGUAGES = frozenset({"he", "ar"})
