from __future__ import annotations

import pytest

from safa_pipeline.normalize.text import CLEAN_RULES, apply_rules, clean_desc

"""Unit tests for the description cleaning chain."""

CORPUS = [
    "FINDING (NRC1) PAX SEAT 12A ARM REST MISSING DOCUMENT EOD-123 R00",
    "FINDING (NRC12) DOCUMENT EOD-2025-77 R01 LAV B MIRROR CRACKED",
    "during exterior safa check fond kruger flap paint damage",
    "DURING THE SAFA INSPECTION LH WING STATIC DISCHARGER MISSING",
    "DURING PERFORMED SAFA CHECK OVERHEAD BIN LATCH BROKEN",
    "PARAGRAPH NO A12. READING LIGHT NOT WORKING",
    "PARAG NO: B-05 SEAT BELT TORN",
    "PARG C07 TRAY TABLE LOOSE",
    "NRC-45 BONDING JUMPER BROKEN AT NLG",
    "W/O 123456 MAINT ENTRY GALLEY CURTAIN DIRTY",
    "DURING PERFOMED W/O:778 CHECK FOUND LIFE VEST MISSING",
    "EXTERIOR SAFA INSPECTION ENGINE COWL   LOOSE",
    "DURING W/O 5521 FWD DOOR PANEL MISISING",
    "LAV A FLOOD LIGHT NOR WORKING",
    "PARA PARA PARA NRC1 A12 NRC1 A12 NRC1 A12 SEAT MISSING",
    "",
]


def test_nested_paragraph_tokens_need_several_passes():
    text = "PARA PARA PARA NRC1 A12 NRC1 A12 NRC1 A12 SEAT MISSING"
    # a single pass only peels the outermost layer
    assert apply_rules(text) != "SEAT MISSING"
    assert clean_desc(text) == "SEAT MISSING"


def test_empty_input_yields_empty_output():
    assert clean_desc("") == ""
    assert clean_desc(None) == ""


def test_finding_and_document_boilerplate_removed():
    out = clean_desc("FINDING (NRC1) PAX SEAT 12A ARM REST MISSING DOCUMENT EOD-123 R00")
    assert out == "PAX SEAT 12A ARM REST MISSING"


def test_finding_chained_with_document():
    out = clean_desc("FINDING (NRC12) DOCUMENT EOD-2025-77 R01 LAV B MIRROR CRACKED")
    assert out == "LAV B MIRROR CRACKED"


def test_exterior_safa_preamble_and_misspelling():
    out = clean_desc("during exterior safa check fond kruger flap paint damage")
    assert out == "FOUND KRUGER FLAP PAINT DAMAGE"


def test_plain_safa_preamble():
    assert clean_desc("DURING THE SAFA INSPECTION LH WING STATIC DISCHARGER MISSING") == (
        "LH WING STATIC DISCHARGER MISSING"
    )
    assert clean_desc("DURING PERFORMED SAFA CHECK OVERHEAD BIN LATCH BROKEN") == (
        "OVERHEAD BIN LATCH BROKEN"
    )


@pytest.mark.parametrize(
    "text, expected",
    [
        ("PARAGRAPH NO A12. READING LIGHT NOT WORKING", "READING LIGHT NOT WORKING"),
        ("PARAG NO: B-05 SEAT BELT TORN", "SEAT BELT TORN"),
        ("PARG C07 TRAY TABLE LOOSE", "TRAY TABLE LOOSE"),
        ("PARAGPH D11 GALLEY PLACARD MISSING", "GALLEY PLACARD MISSING"),
    ],
)
def test_paragraph_reference_spellings(text, expected):
    assert clean_desc(text) == expected


def test_bare_nrc_tokens_and_work_orders():
    assert clean_desc("NRC-45 BONDING JUMPER BROKEN AT NLG") == "BONDING JUMPER BROKEN AT NLG"
    assert clean_desc("W/O 123456 MAINT ENTRY GALLEY CURTAIN DIRTY") == "GALLEY CURTAIN DIRTY"
    assert clean_desc("WP-88 TC 1234 SUNSHADE BROKEN") == "SUNSHADE BROKEN"


def test_during_perform_misspelling():
    out = clean_desc("DURING PERFOMED W/O:778 CHECK FOUND LIFE VEST MISSING")
    assert out == "CHECK FOUND LIFE VEST MISSING"


def test_standalone_exterior_safa_and_whitespace():
    assert clean_desc("EXTERIOR SAFA INSPECTION ENGINE COWL   LOOSE") == "ENGINE COWL LOOSE"


def test_known_misspellings_corrected():
    assert clean_desc("DURING W/O 5521 FWD DOOR PANEL MISISING") == "FWD DOOR PANEL MISSING"
    assert clean_desc("LAV A FLOOD LIGHT NOR WORKING") == "LAV A FLOOD LIGHT NOT WORKING"


def test_tail_number_is_not_a_tc_reference():
    assert clean_desc("TC-SOH LH LANDING LIGHT INOP") == "TC-SOH LH LANDING LIGHT INOP"


def test_output_is_upper_case_and_trimmed():
    out = clean_desc("  cabin  carpet\tworn \n")
    assert out == "CABIN CARPET WORN"


@pytest.mark.parametrize("text", CORPUS)
def test_clean_desc_is_idempotent(text):
    once = clean_desc(text)
    assert clean_desc(once) == once


def test_rules_are_ordered_and_named():
    names = [r.name for r in CLEAN_RULES]
    assert names.index("finding_with_document") < names.index("nrc_token")
    assert names.index("paragraph_no") < names.index("paragraph")
    assert names[-3:] == ["fix_found", "fix_not_working", "fix_missing"]
    assert len(set(names)) == len(names)


def test_each_rule_is_independently_applicable():
    rule = next(r for r in CLEAN_RULES if r.name == "maint_entry")
    assert rule("X MAINT ENTRY Y") == "X   Y"
    assert apply_rules("X MAINT ENTRY Y", (rule,)) == "X Y"


def test_nrc_tokens_need_word_boundary():
    # NRC inside a word is left alone
    assert clean_desc("ENRCOUNTER NRC5") == "ENRCOUNTER"
