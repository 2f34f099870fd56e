from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import pandas as pd

from ..models.record import SAFARecord

logger = logging.getLogger(__name__)

"""CSV / XLSX export of classified records."""

__all__ = [
    "EXPORT_COLUMNS",
    "ExportError",
    "records_to_dataframe",
    "export_records",
]

EXPORT_COLUMNS = [
    "W/O Number",
    "Date",
    "ATA",
    "Aircraft",
    "Problem Type",
    "Component",
    "Clean Description",
]

DATE_FORMAT = "%d.%m.%Y"


class ExportError(Exception):
    pass


def records_to_dataframe(records: Iterable[SAFARecord]) -> pd.DataFrame:
    rows = [
        [
            r.wo_number,
            r.date.strftime(DATE_FORMAT),
            r.ata,
            r.aircraft,
            r.problem_type,
            r.component,
            r.clean_description,
        ]
        for r in records
    ]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def export_records(records: Iterable[SAFARecord], path: Path) -> Path:
    """Write records to ``path``; the format follows the suffix (.csv/.xlsx)."""
    df = records_to_dataframe(records)
    suffix = path.suffix.lower()
    path.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".csv":
        # utf-8-sig so Excel opens Turkish characters correctly
        df.to_csv(path, index=False, encoding="utf-8-sig")
    elif suffix == ".xlsx":
        df.to_excel(path, index=False, sheet_name="SAFA", engine="openpyxl")
    else:
        raise ExportError(f"unsupported export format: {path.suffix}")
    logger.info(f"exported {len(df)} records to {path}")
    return path
