from __future__ import annotations

from pathlib import Path

from safa_pipeline.cli.__main__ import main as cli_main

"""Exit code contract: 0 all rows kept, 2 some rows dropped, 1 fatal."""


def test_exit_zero_when_every_row_produces_a_record(write_config, temp_workdir: Path, excel_factory):
    excel_factory(temp_workdir / "data" / "safa.xlsx", [["Date", "Description"], ["1.1.2025", "MIRROR CRACK"]])
    assert cli_main([]) == 0


def test_exit_two_when_rows_dropped(write_config, sample_excel: Path):
    assert cli_main([]) == 2


def test_exit_one_missing_mandatory_column(write_config, temp_workdir: Path, excel_factory, capsys):
    excel_factory(temp_workdir / "data" / "safa.xlsx", [["A/C", "Description"], ["TC-SOH", "MIRROR CRACK"]])
    assert cli_main([]) == 1
    assert "ERROR processing: Date column not found (W/O Date)" in capsys.readouterr().out


def test_exit_one_when_no_row_survives(write_config, temp_workdir: Path, excel_factory, capsys):
    excel_factory(temp_workdir / "data" / "safa.xlsx", [["Date", "Description"], ["garbage", "MIRROR CRACK"]])
    assert cli_main([]) == 1
    assert "ERROR processing: No processable data found" in capsys.readouterr().out
    # the dropped row is still logged
    assert len(list((temp_workdir / "logs").glob("dropped-*.log"))) == 1


def test_exit_one_empty_sheet(write_config, temp_workdir: Path, excel_factory, capsys):
    excel_factory(temp_workdir / "data" / "safa.xlsx", [["Date", "Description"]])
    assert cli_main([]) == 1
    assert "ERROR processing: Excel file is empty or invalid" in capsys.readouterr().out


def test_turkish_messages(write_config, temp_workdir: Path, excel_factory, capsys):
    text = write_config.read_text(encoding="utf-8").replace("language: en", "language: tr")
    write_config.write_text(text, encoding="utf-8")
    excel_factory(temp_workdir / "data" / "safa.xlsx", [["Date", "A/C"], ["1.1.2025", "TC-SOH"]])
    assert cli_main([]) == 1
    assert "Açıklama kolonu bulunamadı" in capsys.readouterr().out
