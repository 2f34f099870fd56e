from __future__ import annotations

from dataclasses import dataclass

"""First-match keyword rules shared by the classifiers.

A rule table is an ordered tuple; the first rule with any keyword contained in
the text decides the label. Matching is plain substring containment on
upper-cased text, so ``MISS`` also matches ``MISSING``. More specific rules
must come before broader ones sharing vocabulary.
"""

__all__ = [
    "KeywordRule",
    "first_match",
    "labels_of",
]


@dataclass(frozen=True)
class KeywordRule:
    keywords: tuple[str, ...]
    label: str

    def matches(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)


def first_match(text: str, rules: tuple[KeywordRule, ...], default: str) -> str:
    upper = text.upper()
    for rule in rules:
        if rule.matches(upper):
            return rule.label
    return default


def labels_of(rules: tuple[KeywordRule, ...], default: str) -> tuple[str, ...]:
    """Distinct labels of ``rules`` in table order, ``default`` last."""
    seen: list[str] = []
    for rule in rules:
        if rule.label not in seen:
            seen.append(rule.label)
    if default not in seen:
        seen.append(default)
    return tuple(seen)
