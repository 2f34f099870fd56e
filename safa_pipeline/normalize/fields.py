from __future__ import annotations

import re
from typing import Any

from .cells import cell_text, is_blank

"""ATA chapter and tail number normalization."""

__all__ = [
    "UNKNOWN",
    "normalize_aircraft",
    "normalize_ata",
]

UNKNOWN = "UNKNOWN"

_ATA_FULL = re.compile(r"^\d{2}-\d{2}-\d{2}$")
_ATA_SECTION = re.compile(r"^\d{2}-\d{2}$")
_ATA_CHAPTER = re.compile(r"^\d{2}$")


def normalize_aircraft(value: Any) -> str:
    if is_blank(value):
        return UNKNOWN
    return cell_text(value).strip().upper() or UNKNOWN


def normalize_ata(value: Any) -> str:
    """Canonicalize an ATA code to ``DD-DD-DD``.

    ``25`` -> ``25-00-00``, ``25-22`` -> ``25-22-00``; any other shape is
    returned trimmed but otherwise untouched.
    """
    if is_blank(value):
        return UNKNOWN
    text = cell_text(value).strip()
    if _ATA_FULL.match(text):
        return text
    if _ATA_SECTION.match(text):
        return text + "-00"
    if _ATA_CHAPTER.match(text):
        return text + "-00-00"
    return text or UNKNOWN
