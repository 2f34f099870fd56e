from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

"""SAFARecord model: one classified maintenance finding.

Records are produced once per valid input row by the pipeline and are never
mutated afterwards. ``to_dict`` renders the camelCase wire form consumed by
dashboards and JSON exports.
"""

__all__ = [
    "SAFARecord",
]


@dataclass(frozen=True)
class SAFARecord:
    """A single finding after normalization and classification."""
    wo_number: str  # work order id, AUTO-<n> when the sheet has none
    date: date
    ata: str  # DD-DD-DD or the trimmed raw value, UNKNOWN when blank
    aircraft: str  # upper-cased tail number or UNKNOWN
    paragraph: str
    original_description: str  # verbatim input text
    clean_description: str
    problem_type: str
    component: str
    severity: str  # NRC or NRC<digits>

    @property
    def month_key(self) -> str:
        return f"{self.date.year:04d}-{self.date.month:02d}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "woNumber": self.wo_number,
            "date": self.date.isoformat(),
            "ata": self.ata,
            "aircraft": self.aircraft,
            "paragraph": self.paragraph,
            "originalDescription": self.original_description,
            "cleanDescription": self.clean_description,
            "problemType": self.problem_type,
            "component": self.component,
            "severity": self.severity,
        }
