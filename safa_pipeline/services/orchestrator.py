from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from ..config.loader import PipelineConfig
from ..errors import PipelineError
from ..excel.reader import ExcelReadError, SheetHeaderError, read_rows
from ..logging.error_log import ErrorLogBuffer
from ..models.processing_result import ProcessingResult
from .export import ExportError, export_records
from .pipeline import process_excel_data
from .progress import RowProgress

logger = logging.getLogger(__name__)

"""File-level orchestration: read sheet -> pipeline -> export -> result.

Every fatal condition is surfaced as ProcessingError so the CLI has a single
exception type to map onto its exit code.
"""


class ProcessingError(Exception):
    """Fatal error for a whole input file."""


def process_file(config: PipelineConfig) -> ProcessingResult:
    """Run the pipeline over ``config.source_file``.

    Steps:
    1. Read the configured sheet into raw rows
    2. Normalize and classify (dropped rows go to the error log)
    3. Export to the configured CSV/XLSX paths
    4. Return timings and counts

    Raises:
        ProcessingError: unreadable file, missing header, pipeline rejection
            or export failure
    """
    start_time = datetime.now(UTC)
    path = Path(config.source_file)
    logger.info(f"Processing file: {path}")

    try:
        sheet = read_rows(
            path,
            sheet_name=config.sheet_name,
            header_row=config.header_row,
            keep_na_strings=config.keep_na_strings or None,
        )
    except (ExcelReadError, SheetHeaderError) as e:
        raise ProcessingError(str(e)) from e
    logger.debug(f"sheet={sheet.sheet_name} columns={sheet.columns} rows={len(sheet.rows)}")

    error_log = ErrorLogBuffer(Path(config.logs_dir))
    try:
        with RowProgress(len(sheet.rows), description=path.name) as progress:
            records = process_excel_data(
                sheet.rows,
                extra_aliases=config.column_aliases,
                language=config.language,
                error_log=error_log,
                source=path.name,
                progress=progress,
            )
    except PipelineError as e:
        error_log.flush()
        raise ProcessingError(str(e)) from e

    dropped = len(error_log)
    error_log_path = error_log.flush()
    if error_log_path is not None:
        logger.warning(f"{dropped} rows dropped, see {error_log_path}")

    exported: list[Path] = []
    for out in config.output.paths():
        try:
            exported.append(export_records(records, out))
        except (ExportError, OSError) as e:
            raise ProcessingError(f"export failed ({out}): {e}") from e

    end_time = datetime.now(UTC)
    elapsed = (end_time - start_time).total_seconds()
    total_rows = len(sheet.rows)
    return ProcessingResult(
        source=path.name,
        records=records,
        total_rows=total_rows,
        dropped_rows=dropped,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=elapsed,
        throughput_rows_per_sec=(total_rows / elapsed) if elapsed > 0 else 0.0,
        exported_files=exported,
        error_log_path=error_log_path,
    )
