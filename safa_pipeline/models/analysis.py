from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from .record import SAFARecord

"""Analysis models: aggregates, filters and period comparisons over records.

These are read-only views computed by services.analysis; the dashboard layer
consumes them without touching the pipeline.
"""

__all__ = [
    "DateRange",
    "Statistics",
    "AnalysisResult",
    "FilterOptions",
    "ComponentChange",
    "PeriodSummary",
    "PeriodComparison",
]


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date

    def contains(self, value: date) -> bool:
        return self.start <= value <= self.end


@dataclass(frozen=True)
class Statistics:
    total_records: int
    unique_aircraft: int
    unique_ata: int
    date_range: DateRange


@dataclass(frozen=True)
class AnalysisResult:
    """Aggregated view of a record set.

    Count dictionaries are ordered by descending count (ties keep first-seen
    order). ``time_series`` maps ``YYYY-MM`` to the records of that month in
    chronological key order.
    """
    records: list[SAFARecord]
    statistics: Statistics
    aircraft_counts: dict[str, int]
    ata_counts: dict[str, int]
    problem_type_counts: dict[str, int]
    component_counts: dict[str, int]
    time_series: dict[str, list[SAFARecord]]
    top_problems: list[tuple[str, int]]  # (component, count), top 10
    top_aircraft: list[tuple[str, int]]  # (aircraft, count), top 10


@dataclass(frozen=True)
class FilterOptions:
    """Record filter; empty selections mean no filtering on that field."""
    date_range: DateRange | None = None
    aircraft: frozenset[str] = field(default_factory=frozenset)
    ata: frozenset[str] = field(default_factory=frozenset)
    problem_type: frozenset[str] = field(default_factory=frozenset)
    component: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class ComponentChange:
    component: str
    period1: int
    period2: int
    change: int  # period2 - period1
    change_percent: float


@dataclass(frozen=True)
class PeriodSummary:
    date_range: DateRange
    total: int
    records: list[SAFARecord]


@dataclass(frozen=True)
class PeriodComparison:
    period1: PeriodSummary
    period2: PeriodSummary
    total_change: int
    total_change_percent: float
    component_comparison: list[ComponentChange]  # top 10 by |change|
    increased: list[ComponentChange]  # top 5
    decreased: list[ComponentChange]  # top 5
