from __future__ import annotations

from .rules import KeywordRule, first_match, labels_of

"""Problem-type classification of cleaned finding text."""

__all__ = [
    "PROBLEM_TYPE_RULES",
    "PROBLEM_TYPES",
    "OTHER",
    "extract_problem_type",
]

OTHER = "OTHER"

# PAINT_DAMAGE before DAMAGED: both contain "DAMAGE"
PROBLEM_TYPE_RULES: tuple[KeywordRule, ...] = (
    KeywordRule(("PAINT DAMAGE", "PAINT DAMAGED", "PAINTING DAMAGE"), "PAINT_DAMAGE"),
    KeywordRule(("MISSING", "MISS"), "MISSING"),
    KeywordRule(("DAMAGED", "DAMAGE", "CRACK", "BROKEN", "TORN", "WORN"), "DAMAGED"),
    KeywordRule(("LOOSE", "NOT FIXED"), "LOOSE"),
    KeywordRule(
        ("INOP", "NOT WORKING", "NOT ILLUMINATE", "NOT FUNCTIONING", "FAULTY"),
        "INOPERATIVE",
    ),
    KeywordRule(("DIRTY",), "CLEANLINESS"),
    KeywordRule(("LOW",), "LOW_LEVEL"),
    KeywordRule(("ADJUSTMENT", "OUT OF ADJUSTMENT"), "ADJUSTMENT"),
)

PROBLEM_TYPES: tuple[str, ...] = labels_of(PROBLEM_TYPE_RULES, OTHER)


def extract_problem_type(description: str) -> str:
    return first_match(description, PROBLEM_TYPE_RULES, OTHER)
