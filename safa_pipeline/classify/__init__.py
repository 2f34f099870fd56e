"""Keyword classifiers for cleaned finding text."""

from .component import COMPONENTS, extract_component
from .problem_type import PROBLEM_TYPES, extract_problem_type
from .severity import extract_severity

__all__ = [
    "COMPONENTS",
    "PROBLEM_TYPES",
    "extract_component",
    "extract_problem_type",
    "extract_severity",
]
