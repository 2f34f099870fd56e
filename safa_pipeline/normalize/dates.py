from __future__ import annotations

import re
import warnings
from datetime import date, datetime
from typing import Any

import pandas as pd

from .cells import is_blank

"""Date parsing for finding spreadsheets.

Day-first dotted dates (``1.05.2025``) are matched exactly and built from their
parts, so no locale guessing is involved. Everything else goes through
``pandas.to_datetime``, except strings without a digit such as ``today``,
which are never dates. ``None`` means "no date" and makes the pipeline skip
the row.
"""

__all__ = [
    "DOTTED_DATE",
    "parse_date",
]

DOTTED_DATE = re.compile(r"^(\d{1,2})\.(\d{1,2})\.(\d{4})$")
# pandas reads "today" and "now" as the current date
_HAS_DIGIT = re.compile(r"\d")


def parse_date(value: Any) -> date | None:
    if is_blank(value):
        return None
    # pandas.Timestamp is a datetime subclass
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    m = DOTTED_DATE.match(text)
    if m:
        day, month, year = (int(g) for g in m.groups())
        try:
            return date(year, month, day)
        except ValueError:
            return None

    if not _HAS_DIGIT.search(text):
        return None

    with warnings.catch_warnings():
        # "Could not infer format" noise for free-form strings
        warnings.simplefilter("ignore", UserWarning)
        parsed = pd.to_datetime(text, errors="coerce")
    if pd.isna(parsed):
        return None
    return parsed.date()
