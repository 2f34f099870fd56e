from __future__ import annotations

import re

"""Severity tag extraction from the original (uncleaned) description."""

__all__ = [
    "DEFAULT_SEVERITY",
    "extract_severity",
]

# Also returned when the text carries no NRC marker at all.
DEFAULT_SEVERITY = "NRC"

_NRC = re.compile(r"NRC(\d+)?")


def extract_severity(description: str) -> str:
    m = _NRC.search(str(description).upper())
    if m and m.group(1):
        return f"NRC{m.group(1)}"
    return DEFAULT_SEVERITY
