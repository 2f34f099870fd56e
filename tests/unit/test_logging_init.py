from __future__ import annotations

import json
import logging
from io import StringIO
from pathlib import Path

from safa_pipeline.logging.error_log import ErrorLogBuffer
from safa_pipeline.logging.init import (
    LabeledFormatter,
    get_logger,
    log_summary,
    reset_logging,
    setup_logging,
)
from safa_pipeline.models.row_issue import RowIssue


def test_setup_logging_creates_logger_with_labeled_formatter():
    logger = setup_logging()
    assert logger.name == "safa_pipeline"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, LabeledFormatter)
    assert logger.propagate is False


def test_setup_logging_is_idempotent():
    assert setup_logging() is setup_logging()
    assert get_logger() is setup_logging()
    assert len(get_logger().handlers) == 1


def test_logging_labeled_prefixes():
    captured_output = StringIO()
    logger = logging.getLogger("test_safa_pipeline")
    logger.setLevel(logging.INFO)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logging.addLevelName(25, "SUMMARY")
    handler = logging.StreamHandler(captured_output)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    logger.info("Test info message")
    logger.warning("Test warning message")
    logger.error("Test error message")
    logger.log(25, "Test summary message")

    lines = captured_output.getvalue().strip().split("\n")
    assert lines == [
        "INFO Test info message",
        "WARN Test warning message",
        "ERROR Test error message",
        "SUMMARY Test summary message",
    ]


def test_module_loggers_reach_app_handler(capsys):
    setup_logging()
    logging.getLogger("safa_pipeline.services.pipeline").warning("row dropped")
    log_summary("rows=1")
    out = capsys.readouterr().out
    assert "WARN row dropped" in out
    assert "SUMMARY rows=1" in out


def test_reset_logging_restores_propagation():
    setup_logging()
    reset_logging()
    logger = logging.getLogger("safa_pipeline")
    assert logger.handlers == []
    assert logger.propagate is True


def test_row_issue_json_line():
    rec = RowIssue.create("safa.xlsx", 3, "UNPARSABLE_DATE", "32.13.2025")
    data = json.loads(rec.to_json_line())
    assert set(data) == {"timestamp", "source", "row", "reason", "detail"}
    assert data["timestamp"].endswith("Z")
    assert data["row"] == 3
    assert RowIssue.create("safa.xlsx", -1, "ROW_ERROR").detail == ""


def test_error_log_buffer_flush(tmp_path: Path):
    buffer = ErrorLogBuffer(tmp_path / "logs")
    assert buffer.flush() is None
    buffer.append(RowIssue.create("safa.xlsx", 2, "MISSING_DATE"))
    buffer.append(RowIssue.create("safa.xlsx", 5, "MISSING_DESCRIPTION"))
    assert len(buffer) == 2
    path = buffer.flush()
    assert path is not None and path.name.startswith("dropped-")
    lines = path.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["row"] for line in lines] == [2, 5]
    assert len(buffer) == 0
