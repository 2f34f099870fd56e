from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from .record import SAFARecord

"""Processing result model for a single spreadsheet run.

Aggregates what the CLI needs for its SUMMARY line and exit code: the records,
how many input rows were seen and dropped, and wall clock timings.
"""


@dataclass(frozen=True)
class ProcessingResult:
    """Outcome of running the pipeline over one input file."""
    source: str  # input file name
    records: list[SAFARecord]
    total_rows: int  # data rows read from the sheet
    dropped_rows: int  # rows that produced no record
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    throughput_rows_per_sec: float  # total_rows / elapsed
    exported_files: list[Path] = field(default_factory=list)
    error_log_path: Path | None = None  # set only when rows were dropped

    @property
    def record_count(self) -> int:
        return len(self.records)

    @property
    def has_dropped_rows(self) -> bool:
        return self.dropped_rows > 0
