from __future__ import annotations

import re

from .rules import KeywordRule, first_match, labels_of

"""Component classification of cleaned finding text.

Two pre-checks short-circuit the table: any ``JUMPER`` is a bonding finding,
and lanyard rings are recognised by pattern. The table itself is first match
wins, so multi-word keywords (KRUGER FLAP, FLOOR PANEL, PAX SEAT ...) sit above
the bare words they contain (FLAP, PANEL, SEAT, DOOR, LIGHT).
"""

__all__ = [
    "COMPONENT_RULES",
    "COMPONENTS",
    "LANYARD_RING_PATTERN",
    "OTHER",
    "extract_component",
]

OTHER = "OTHER"

LANYARD_RING_PATTERN = re.compile(r"\bLANYARDS?(?:'S|S')?\s+RINGS?\b")

COMPONENT_RULES: tuple[KeywordRule, ...] = (
    KeywordRule(("OVERHEAD BIN", "STOWAGE BIN", "OVERHEAD STOWAGE"), "OVERHEAD_BIN"),
    KeywordRule(("BIN STOPPER", "DOOR STOPPER"), "BIN_STOPPER"),
    KeywordRule(("TRAY TABLE",), "TRAY_TABLE"),
    KeywordRule(("PAX SEAT", "PASSENGER SEAT", "ATTENDANT SEAT"), "SEAT"),
    KeywordRule(("SEAT BELT", "SAFETY HARNESS", "SAFETY BELT"), "SEAT_BELT"),
    KeywordRule(("READING LIGHT", "FLOOD LIGHT", "LIGHT LENS"), "LIGHT"),
    KeywordRule(("LIFE VEST",), "LIFE_VEST"),
    KeywordRule(("LAVATORY", "LAV A", "LAV B", "LAV C", "LAV D", "LAV E"), "LAVATORY"),
    KeywordRule(("GALLEY",), "GALLEY"),
    KeywordRule(("PLACARD",), "PLACARD"),
    KeywordRule(("SUNSHADE",), "SUNSHADE"),
    KeywordRule(("CURTAIN",), "CURTAIN"),
    KeywordRule(("OXYGEN", "OXY BOTTLE"), "OXYGEN"),
    KeywordRule(("MIRROR",), "MIRROR"),
    KeywordRule(("CARPET", "FLOOR MAT"), "CARPET"),
    KeywordRule(
        (
            "#1 ENGINE", "#2 ENGINE", "#1 ENG", "#2 ENG",
            "ENGINE COWL", "FAN COWL", "FAN BLADE", "ENGINE",
        ),
        "ENGINE",
    ),
    KeywordRule(("KRUGER FLAP",), "KRUGER_FLAP"),
    KeywordRule(("FLAP",), "FLAP"),
    KeywordRule(("LANDING LIGHT", "LANDING GEAR", "NOSE GEAR", "MAIN GEAR"), "LANDING_GEAR"),
    KeywordRule(("WATER SERVICE", "POTABLE WATER", "PORTABLE WATER"), "WATER_SYSTEM"),
    KeywordRule(("STATIC DISCHARGER",), "STATIC_DISCHARGER"),
    KeywordRule(("BONDING WIRE", "BONDING"), "BONDING"),
    KeywordRule(("HINGE",), "HINGE"),
    KeywordRule(("LATCH",), "LATCH"),
    KeywordRule(("FLOOR PANEL",), "FLOOR_PANEL"),
    KeywordRule(("CEILING PANEL",), "CEILING_PANEL"),
    KeywordRule(("DOOR PANEL",), "DOOR_PANEL"),
    KeywordRule(("SIDE PANEL", "SIDEWALL PANEL", "WALL PANEL"), "SIDEWALL_PANEL"),
    KeywordRule(("TRIM PANEL",), "TRIM_PANEL"),
    KeywordRule(("TRIM", "PANEL"), "TRIM_PANEL"),
    KeywordRule(("SEAT",), "SEAT"),
    KeywordRule(("DOOR",), "DOOR"),
    KeywordRule(("LIGHT",), "LIGHT"),
)

COMPONENTS: tuple[str, ...] = ("BONDING", "LANYARD_RING") + tuple(
    label for label in labels_of(COMPONENT_RULES, OTHER) if label != "BONDING"
)


def extract_component(description: str) -> str:
    text = description.upper()
    if "JUMPER" in text:
        return "BONDING"
    if LANYARD_RING_PATTERN.search(text):
        return "LANYARD_RING"
    return first_match(text, COMPONENT_RULES, OTHER)
