"""Domain models for the SAFA finding pipeline.

Records produced by the pipeline, the dropped-row issue model, per-run
processing results and the read-only analysis views built on top of them.
"""

from .analysis import AnalysisResult, DateRange, FilterOptions, PeriodComparison, Statistics
from .processing_result import ProcessingResult
from .record import SAFARecord
from .row_issue import RowIssue

__all__ = [
    # Pipeline output
    "SAFARecord",
    "RowIssue",
    "ProcessingResult",
    # Analysis views
    "AnalysisResult",
    "DateRange",
    "FilterOptions",
    "PeriodComparison",
    "Statistics",
]
