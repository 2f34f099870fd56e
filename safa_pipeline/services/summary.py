from __future__ import annotations

from collections import Counter

from ..models.processing_result import ProcessingResult

"""SUMMARY line rendering for the CLI.

Format:
SUMMARY rows={total} records={records} dropped={dropped} elapsed_sec={elapsed}
throughput_rps={throughput}
"""


def _format_number(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # avoid scientific notation
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return str(round(value, 3))


def render_summary_line(result: ProcessingResult) -> str:
    """Render the SUMMARY line.

    Examples:
        >>> from datetime import datetime, timezone
        >>> start = datetime(2025, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
        >>> end = datetime(2025, 1, 1, 10, 0, 2, tzinfo=timezone.utc)
        >>> result = ProcessingResult(
        ...     source="safa.xlsx", records=[], total_rows=10, dropped_rows=2,
        ...     start_time=start, end_time=end, elapsed_seconds=2.0,
        ...     throughput_rows_per_sec=5.0,
        ... )
        >>> render_summary_line(result)
        'SUMMARY rows=10 records=0 dropped=2 elapsed_sec=2 throughput_rps=5'
    """
    return (
        f"SUMMARY rows={result.total_rows} "
        f"records={result.record_count} "
        f"dropped={result.dropped_rows} "
        f"elapsed_sec={_format_number(result.elapsed_seconds)} "
        f"throughput_rps={_format_number(result.throughput_rows_per_sec)}"
    )


def render_breakdown(result: ProcessingResult) -> str:
    """``problem_types=MISSING:3,DAMAGED:1`` ordered by descending count."""
    counts = Counter(r.problem_type for r in result.records)
    parts = ",".join(f"{label}:{n}" for label, n in counts.most_common())
    return f"problem_types={parts}"
