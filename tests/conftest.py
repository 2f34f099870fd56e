# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path

import pandas as pd
import pytest

from safa_pipeline.logging.init import reset_logging


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("SAFA_CONFIG", raising=False)
        yield p


@pytest.fixture(autouse=True)
def _fresh_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source_file: ./data/safa.xlsx
sheet_name: null
header_row: 1
language: en
column_aliases:
  description: [remarks]
logs_dir: ./logs
output:
  csv: ./out/records.csv
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "safa.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


SAMPLE_SHEET = [
    ["W/O Number", "W/O Date", "ATA", "A/C", "Paragraph No", "Description"],
    [
        "WO-1001", "1.05.2025", "25", "tc-soh", "A12",
        "FINDING (NRC1) PAX SEAT 12A ARM REST MISSING DOCUMENT EOD-123 R00",
    ],
    [
        "WO-1002", "14.05.2025", "52-10", "TC-SOH", "B03",
        "DURING EXTERIOR SAFA CHECK FOND KRUGER FLAP PAINT DAMAGE",
    ],
    [
        "WO-1003", "2.06.2025", "24-40-00", "tc-jhk", None,
        "NRC-45 BONDING JUMPER BROKEN AT NLG",
    ],
    ["WO-1004", None, "33", "tc-jhk", None, "LAV B LIGHT INOP"],
]


def make_excel(path: Path, rows: list[list[object]], sheet_name: str = "Findings") -> Path:
    """Write ``rows`` (header included) as a single-sheet workbook."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        pd.DataFrame(rows).to_excel(writer, sheet_name=sheet_name, header=False, index=False)
    return path


@pytest.fixture()
def excel_factory():
    return make_excel


@pytest.fixture()
def sample_sheet() -> list[list[object]]:
    return [list(r) for r in SAMPLE_SHEET]


@pytest.fixture()
def sample_excel(temp_workdir: Path) -> Path:
    return make_excel(temp_workdir / "data" / "safa.xlsx", SAMPLE_SHEET)
