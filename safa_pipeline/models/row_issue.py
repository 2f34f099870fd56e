from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""RowIssue model for the dropped-row log.

Every input row the pipeline drops is described by one RowIssue and written
as one JSON Lines entry. ``row`` is the 1-based data row index; -1 is used for
dataset-level problems where no single row is to blame.
"""

__all__ = [
    "RowIssue",
    "MISSING_DATE",
    "MISSING_DESCRIPTION",
    "UNPARSABLE_DATE",
    "ROW_ERROR",
]

MISSING_DATE = "MISSING_DATE"
MISSING_DESCRIPTION = "MISSING_DESCRIPTION"
UNPARSABLE_DATE = "UNPARSABLE_DATE"
ROW_ERROR = "ROW_ERROR"


@dataclass(frozen=True)
class RowIssue:
    """Structured dropped-row record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        source: file name (or other label) the rows came from
        row: 1-based data row index, -1 when unknown
        reason: UPPER_SNAKE_CASE classification of the drop
        detail: free text (offending value or exception message)
    """
    timestamp: str
    source: str
    row: int
    reason: str
    detail: str

    @staticmethod
    def create(source: str, row: int, reason: str, detail: str = "") -> RowIssue:
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return RowIssue(
            timestamp=ts,
            source=source,
            row=row,
            reason=reason,
            detail=detail,
        )

    def to_json_line(self) -> str:
        return json.dumps(asdict(self), ensure_ascii=False)
