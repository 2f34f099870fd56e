from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pandas as pd

"""Spreadsheet reader: finding workbook -> list of raw rows.

The header row (first row by default) supplies the keys of every row dict.
Fully empty rows are skipped and NaN cells become None. The pipeline does
all value interpretation; nothing is parsed or trimmed here.
"""

__all__ = [
    "ExcelReadError",
    "SheetHeaderError",
    "SheetData",
    "read_excel_file",
    "dataframe_to_rows",
    "read_rows",
]

EXCEL_SUFFIXES = {".xlsx", ".xlsm", ".xls"}


class ExcelReadError(Exception):
    """Raised when the input file is missing or cannot be parsed."""


class SheetHeaderError(Exception):
    """Raised when the sheet has no row at the configured header position."""


@dataclass
class SheetData:
    sheet_name: str
    columns: list[str]
    rows: list[dict[str, Any]]


def _na_options(keep_na_strings: list[str] | None) -> dict[str, Any]:
    # Remove selected strings (e.g. 'NA' as a tail number) from pandas' NaN set
    if not keep_na_strings:
        return {}
    import pandas._libs.parsers as parsers

    custom_na = parsers.STR_NA_VALUES - set(keep_na_strings)
    return {"keep_default_na": False, "na_values": list(custom_na)}


def read_excel_file(
    path: Path,
    sheet_name: str | None = None,
    keep_na_strings: list[str] | None = None,
) -> tuple[str, pd.DataFrame]:
    """Read one sheet without header interpretation.

    Parameters
    ----------
    path: .xlsx/.xls workbook or .csv file
    sheet_name: sheet to read; None means the first sheet
    keep_na_strings: strings pandas should NOT turn into NaN

    Returns
    -------
    (sheet name, raw DataFrame); CSV files report their stem as sheet name
    """
    if not path.exists():
        raise ExcelReadError(f"file not found: {path}")
    na_kwargs = _na_options(keep_na_strings)
    suffix = path.suffix.lower()
    try:
        if suffix == ".csv":
            df = pd.read_csv(path, header=None, dtype=object, **na_kwargs)
            return path.stem, df
        if suffix not in EXCEL_SUFFIXES:
            raise ExcelReadError(f"unsupported file type: {path.suffix}")
        with pd.ExcelFile(path) as xls:
            names = [str(n) for n in xls.sheet_names]
            if sheet_name is None:
                target = names[0]
            elif sheet_name in names:
                target = sheet_name
            else:
                raise ExcelReadError(f"sheet '{sheet_name}' not found in {path.name} (sheets: {names})")
            df = xls.parse(target, header=None, **na_kwargs)
    except ExcelReadError:
        raise
    except Exception as e:
        raise ExcelReadError(f"cannot read {path.name}: {e}") from e
    return target, df


def dataframe_to_rows(df: pd.DataFrame, sheet_name: str, header_row: int = 1) -> SheetData:
    """Turn a raw DataFrame into row dicts keyed by the header row.

    ``header_row`` is 1-based. Columns with an empty header are dropped.
    """
    if header_row < 1 or df.shape[0] < header_row:
        raise SheetHeaderError(f"sheet '{sheet_name}' has no header at row {header_row}")
    header = df.iloc[header_row - 1].tolist()
    columns: list[str] = []
    keep: list[int] = []
    for idx, name in enumerate(header):
        if pd.isna(name) or str(name).strip() == "":
            continue
        columns.append(str(name).strip())
        keep.append(idx)

    rows: list[dict[str, Any]] = []
    for _, raw in df.iloc[header_row:].iterrows():
        if raw.isna().all():
            continue
        values = raw.tolist()
        rows.append({col: (None if pd.isna(values[i]) else values[i]) for col, i in zip(columns, keep)})
    return SheetData(sheet_name=sheet_name, columns=columns, rows=rows)


def read_rows(
    path: Path,
    sheet_name: str | None = None,
    header_row: int = 1,
    keep_na_strings: list[str] | None = None,
) -> SheetData:
    name, df = read_excel_file(path, sheet_name=sheet_name, keep_na_strings=keep_na_strings)
    return dataframe_to_rows(df, name, header_row=header_row)
