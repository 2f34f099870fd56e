from __future__ import annotations

"""Batch-fatal pipeline errors.

Each error carries a stable ``code`` so callers can react without parsing
text, and a message rendered in the deployment language (``en`` or ``tr``).
Row-level problems never raise; they drop the row instead.
"""

__all__ = [
    "PipelineError",
    "EmptyDatasetError",
    "MissingColumnError",
    "NoRecordsError",
    "SUPPORTED_LANGUAGES",
    "message_for",
]

SUPPORTED_LANGUAGES = ("en", "tr")

MESSAGES: dict[str, dict[str, str]] = {
    "EMPTY_DATASET": {
        "en": "Excel file is empty or invalid",
        "tr": "Excel dosyası boş veya geçersiz",
    },
    "MISSING_DATE_COLUMN": {
        "en": "Date column not found (W/O Date)",
        "tr": "Tarih kolonu bulunamadı (W/O Date)",
    },
    "MISSING_DESCRIPTION_COLUMN": {
        "en": "Description column not found (Description)",
        "tr": "Açıklama kolonu bulunamadı (Description)",
    },
    "NO_RECORDS": {
        "en": "No processable data found",
        "tr": "İşlenebilir veri bulunamadı",
    },
}


def message_for(code: str, language: str = "en") -> str:
    texts = MESSAGES[code]
    return texts.get(language, texts["en"])


class PipelineError(Exception):
    """Base class for errors that reject a whole dataset."""

    code = "PIPELINE_ERROR"

    def __init__(self, message: str | None = None, *, language: str = "en") -> None:
        self.language = language
        super().__init__(message or message_for(self.code, language))


class EmptyDatasetError(PipelineError):
    code = "EMPTY_DATASET"


class MissingColumnError(PipelineError):
    """Raised when a mandatory column (date or description) cannot be resolved."""

    def __init__(self, field: str, *, language: str = "en") -> None:
        self.field = field
        self.code = f"MISSING_{field.upper()}_COLUMN"
        super().__init__(language=language)


class NoRecordsError(PipelineError):
    code = "NO_RECORDS"
