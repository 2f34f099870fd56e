from __future__ import annotations

import re
from dataclasses import dataclass

"""Free-text cleaning for finding descriptions (``clean_desc``).

Findings exported from the maintenance system carry a lot of administrative
boilerplate: NRC card references, EOD document numbers, paragraph codes,
work-order numbers and "DURING EXTERIOR SAFA CHECK ..." preambles. The cleaner
upper-cases the text and runs an ordered chain of substitutions that strips
that metadata so only the operational finding remains for classification.

Order is significant. Compound phrases (``FINDING (NRC..) DOCUMENT EOD..R00``)
are removed before the narrower rules (bare ``NRC..`` tokens) see what is left.
Every rule is a removal or a spelling fix; none adds domain content.
"""

__all__ = [
    "CleanRule",
    "CLEAN_RULES",
    "apply_rules",
    "clean_desc",
]


@dataclass(frozen=True)
class CleanRule:
    """One step of the cleaning chain: ``pattern`` -> ``replacement``."""
    name: str
    pattern: re.Pattern[str]
    replacement: str = " "

    def __call__(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def _rule(name: str, pattern: str, replacement: str = " ") -> CleanRule:
    return CleanRule(name, re.compile(pattern), replacement)


# PARAGRAPH / PARAG / PARA / PARG ... longest spellings first
_PARA_WORD = r"(?:PARAGRAPH|PARAGRPH|PARAGRAPGH|PARAGPH|PARAGH|PARAG|PARA|PARG|PRG)"
# <letter><2 digits>, e.g. A12, B-05, C.07
_PARA_CODE = r"[A-Z]\s*[-.]?\s*\d{2}\b\.?"
_SAFA_END = r".*?\b(?:CHECK|INSPECTION|GVI)\b"
_PERFORM = r"(?:PERFORM|PERFOM|PERFROM|PREFORM|PERFORN)(?:ED|ING)?"

CLEAN_RULES: tuple[CleanRule, ...] = (
    # 1. finding / document boilerplate
    _rule(
        "finding_with_document",
        r"FINDING\s*\(\s*NRC[^)]*\)\s*DOCUMENT\s+EOD[-\sA-Z0-9]*?R\d{2}\b",
    ),
    _rule("finding_nrc", r"FINDING\s*\(\s*NRC[^)]*\)"),
    _rule("document_eod", r"DOCUMENT\s+EOD[-\sA-Z0-9]*?R\d{2}\b"),
    # 2. paragraph references
    _rule(
        "paragraph_no",
        rf"\b{_PARA_WORD}\.?\s*(?:NO|NR|NUMBER)\.?\s*[:#-]?\s*{_PARA_CODE}",
    ),
    _rule("paragraph", rf"\b{_PARA_WORD}\.?\s*[:#-]?\s*{_PARA_CODE}"),
    # 3. bare NRC tokens
    _rule("nrc_token", r"\bNRC[-\dA-Z]*"),
    # 4. work order / work package / TC references
    _rule("wo_reference", r"\b(?:W/O|WO|WP|TC)\s*[:\-]?\s*\d+\b"),
    # 5.
    _rule("maint_entry", r"\bMAINT\.?\s+ENTRY\b"),
    # 6. DURING ... SAFA ... CHECK preambles
    _rule("during_exterior_safa", rf"\bDURING\s+(?:THE\s+)?EXTERIOR\s+SAFA\b{_SAFA_END}"),
    _rule("during_safa", rf"\bDURING\s+(?:THE\s+)?(?:[A-Z/]+\s+){{0,3}}?SAFA\b{_SAFA_END}"),
    # 7.
    _rule("exterior_safa", r"\bEXTERIOR\s+SAFA\s+(?:CHECK|INSPECTION)\b"),
    # 8.
    _rule("during_perform", rf"\bDURING\s+{_PERFORM}\b"),
    # 9.
    _rule("during_wo", r"\bDURING\s+W/O\s*\d+\b"),
    _rule("during_the", r"\bDURING\s+THE\s+"),
    _rule("leading_during", r"^\s*(?:DURING\s+)+"),
    # 10. known misspellings
    _rule("fix_found", r"\bFOND\b", "FOUND"),
    _rule("fix_not_working", r"\bNOR\s+WORKING\b", "NOT WORKING"),
    _rule("fix_missing", r"\bMISISING\b", "MISSING"),
)

_WHITESPACE = re.compile(r"\s+")


def _collapse(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def apply_rules(text: str, rules: tuple[CleanRule, ...] = CLEAN_RULES) -> str:
    """One pass of the chain over already upper-cased text."""
    for rule in rules:
        text = rule(text)
    return _collapse(text)


def clean_desc(text: str | None) -> str:
    """Upper-case ``text`` and strip report boilerplate.

    The chain is re-applied until a pass changes nothing: a removal can bring
    two fragments together that an earlier rule would have matched, e.g.
    ``PARA NRC12 A12``. Every rule removes whole words or makes a one-way
    spelling fix, so the loop terminates.
    """
    if not text:
        return ""
    cleaned = _collapse(str(text).upper())
    while True:
        next_pass = apply_rules(cleaned)
        if next_pass == cleaned:
            return cleaned
        cleaned = next_pass
