from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from ..classify.component import extract_component
from ..classify.problem_type import extract_problem_type
from ..classify.severity import extract_severity
from ..errors import EmptyDatasetError, NoRecordsError
from ..logging.error_log import ErrorLogBuffer
from ..models.record import SAFARecord
from ..models.row_issue import (
    MISSING_DATE,
    MISSING_DESCRIPTION,
    ROW_ERROR,
    UNPARSABLE_DATE,
    RowIssue,
)
from ..normalize.cells import cell_text, is_blank
from ..normalize.columns import build_alias_table, normalize_row_keys, resolve_columns
from ..normalize.dates import parse_date
from ..normalize.fields import normalize_aircraft, normalize_ata
from ..normalize.text import clean_desc
from .progress import RowProgress

logger = logging.getLogger(__name__)

"""Record pipeline: raw spreadsheet rows -> classified SAFARecords.

Failure policy:
- batch-fatal (raise PipelineError): empty input, date/description column
  missing, no record survived
- row-local (drop the row, keep going): blank date or description,
  unparsable date, any exception while building the record
"""

__all__ = [
    "process_excel_data",
    "build_record",
    "RowSkipped",
]


class RowSkipped(Exception):
    """A row that cannot produce a record. Never escapes the pipeline."""

    def __init__(self, reason: str, detail: str = "") -> None:
        self.reason = reason
        self.detail = detail
        super().__init__(f"{reason}: {detail}" if detail else reason)


def _field(row: Mapping[str, Any], column_map: Mapping[str, str], field: str) -> Any:
    column = column_map.get(field)
    if column is None:
        return None
    return row.get(column)


def build_record(row: Mapping[str, Any], column_map: Mapping[str, str], index: int) -> SAFARecord:
    """Build the record for one row (keys already normalized).

    Raises
    ------
    RowSkipped: the row lacks a date or description, or the date is unparsable
    """
    date_value = _field(row, column_map, "date")
    description_value = _field(row, column_map, "description")
    if is_blank(date_value):
        raise RowSkipped(MISSING_DATE)
    if is_blank(description_value):
        raise RowSkipped(MISSING_DESCRIPTION)

    parsed = parse_date(date_value)
    if parsed is None:
        raise RowSkipped(UNPARSABLE_DATE, str(date_value))

    wo_value = _field(row, column_map, "wo_number")
    wo_number = cell_text(wo_value) if not is_blank(wo_value) else f"AUTO-{index + 1}"
    description = cell_text(description_value)
    cleaned = clean_desc(description)

    return SAFARecord(
        wo_number=wo_number,
        date=parsed,
        ata=normalize_ata(_field(row, column_map, "ata")),
        aircraft=normalize_aircraft(_field(row, column_map, "aircraft")),
        paragraph=cell_text(_field(row, column_map, "paragraph")),
        original_description=description,
        clean_description=cleaned,
        problem_type=extract_problem_type(cleaned),
        component=extract_component(cleaned),
        severity=extract_severity(description),
    )


def process_excel_data(
    rows: Sequence[Mapping[Any, Any]],
    *,
    extra_aliases: Mapping[str, Iterable[str]] | None = None,
    language: str = "en",
    error_log: ErrorLogBuffer | None = None,
    source: str = "<rows>",
    progress: RowProgress | None = None,
) -> list[SAFARecord]:
    """Normalize and classify raw rows.

    Args:
        rows: raw rows (header -> cell); all rows are assumed to share the
            first row's headers
        extra_aliases: additional header aliases per canonical field
        language: language of PipelineError messages ("en" or "tr")
        error_log: receives one RowIssue per dropped row
        source: label used in RowIssue entries (usually the file name)
        progress: advanced once per row

    Returns:
        Records in input order, one per surviving row

    Raises:
        EmptyDatasetError: ``rows`` is empty
        MissingColumnError: date or description column not found
        NoRecordsError: every row was dropped
    """
    if not rows:
        raise EmptyDatasetError(language=language)

    column_map = resolve_columns(
        normalize_row_keys(rows[0]).keys(), build_alias_table(extra_aliases), language=language
    )
    logger.debug(f"column map: {column_map}")

    records: list[SAFARecord] = []
    for index, raw in enumerate(rows):
        try:
            records.append(build_record(normalize_row_keys(raw), column_map, index))
        except RowSkipped as e:
            logger.debug(f"row {index + 1} skipped: {e}")
            if error_log is not None:
                error_log.append(RowIssue.create(source, index + 1, e.reason, e.detail))
        except Exception as e:
            logger.warning(f"Error processing row {index + 1}: {e}")
            if error_log is not None:
                error_log.append(RowIssue.create(source, index + 1, ROW_ERROR, str(e)))
        finally:
            if progress is not None:
                progress.advance()

    if not records:
        raise NoRecordsError(language=language)

    logger.debug(f"{len(records)}/{len(rows)} rows produced records")
    return records
