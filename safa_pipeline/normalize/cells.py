from __future__ import annotations

from typing import Any

import pandas as pd

"""Cell helpers shared by the normalizers.

Spreadsheet cells arrive as str, int, float (NaN for empty cells), pandas
Timestamps or None depending on how the sheet was read.
"""


def is_blank(value: Any) -> bool:
    """True for None, NaN/NaT and empty or whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        # list-like cells: pd.isna returns an array
        return False


def cell_text(value: Any) -> str:
    """Render a cell as text; integral floats lose their ``.0`` suffix."""
    if is_blank(value):
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
