from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from ..models.analysis import (
    AnalysisResult,
    ComponentChange,
    DateRange,
    FilterOptions,
    PeriodComparison,
    PeriodSummary,
    Statistics,
)
from ..models.record import SAFARecord

"""Aggregations over pipeline output for the dashboard layer.

Pure read-only functions: counts, monthly series, top lists, filtering and
two-period comparison. Nothing here touches the classification rules.
"""

__all__ = [
    "AnalysisError",
    "TOP_N",
    "analyze_records",
    "filter_records",
    "compare_periods",
]

TOP_N = 10
TOP_CHANGES = 5


class AnalysisError(Exception):
    """Raised when there is nothing to analyze."""


def _counts(values: Iterable[str]) -> dict[str, int]:
    # most_common keeps first-seen order among equal counts
    return dict(Counter(values).most_common())


def analyze_records(records: list[SAFARecord]) -> AnalysisResult:
    if not records:
        raise AnalysisError("no records loaded")

    aircraft_counts = _counts(r.aircraft for r in records)
    ata_counts = _counts(r.ata for r in records)
    problem_type_counts = _counts(r.problem_type for r in records)
    component_counts = _counts(r.component for r in records if r.component)

    time_series: dict[str, list[SAFARecord]] = {}
    for record in sorted(records, key=lambda r: r.date):
        time_series.setdefault(record.month_key, []).append(record)

    dates = [r.date for r in records]
    statistics = Statistics(
        total_records=len(records),
        unique_aircraft=len(aircraft_counts),
        unique_ata=len(ata_counts),
        date_range=DateRange(start=min(dates), end=max(dates)),
    )
    return AnalysisResult(
        records=list(records),
        statistics=statistics,
        aircraft_counts=aircraft_counts,
        ata_counts=ata_counts,
        problem_type_counts=problem_type_counts,
        component_counts=component_counts,
        time_series=time_series,
        top_problems=list(component_counts.items())[:TOP_N],
        top_aircraft=list(aircraft_counts.items())[:TOP_N],
    )


def filter_records(records: Iterable[SAFARecord], options: FilterOptions) -> list[SAFARecord]:
    """Apply ``options``; the date range is inclusive on both ends."""
    result = []
    for r in records:
        if options.date_range is not None and not options.date_range.contains(r.date):
            continue
        if options.aircraft and r.aircraft not in options.aircraft:
            continue
        if options.ata and r.ata not in options.ata:
            continue
        if options.problem_type and r.problem_type not in options.problem_type:
            continue
        if options.component and r.component not in options.component:
            continue
        result.append(r)
    return result


def _change_percent(before: int, after: int) -> float:
    if before > 0:
        return (after - before) / before * 100
    return 100.0 if after > 0 else 0.0


def compare_periods(
    records: Iterable[SAFARecord], period1: DateRange, period2: DateRange
) -> PeriodComparison:
    """Compare finding counts per component between two date ranges."""
    records = list(records)
    p1 = [r for r in records if period1.contains(r.date)]
    p2 = [r for r in records if period2.contains(r.date)]
    c1 = Counter(r.component for r in p1)
    c2 = Counter(r.component for r in p2)

    changes = [
        ComponentChange(
            component=comp,
            period1=c1[comp],
            period2=c2[comp],
            change=c2[comp] - c1[comp],
            change_percent=_change_percent(c1[comp], c2[comp]),
        )
        for comp in dict.fromkeys([*c1, *c2])
    ]
    changes.sort(key=lambda c: abs(c.change), reverse=True)

    total_change = len(p2) - len(p1)
    return PeriodComparison(
        period1=PeriodSummary(date_range=period1, total=len(p1), records=p1),
        period2=PeriodSummary(date_range=period2, total=len(p2), records=p2),
        total_change=total_change,
        total_change_percent=(total_change / len(p1) * 100) if p1 else 0.0,
        component_comparison=changes[:TOP_N],
        increased=[c for c in changes if c.change > 0][:TOP_CHANGES],
        decreased=[c for c in changes if c.change < 0][:TOP_CHANGES],
    )
