from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from safa_pipeline.config.loader import DEFAULT_CONFIG_PATH, ConfigError, PipelineConfig, load_config
from safa_pipeline.logging.init import log_summary, setup_logging
from safa_pipeline.services.orchestrator import ProcessingError, process_file
from safa_pipeline.services.summary import render_breakdown, render_summary_line

"""CLI entrypoint.

Flow:
- Load .env (SAFA_CONFIG may point at another config file)
- Load config; a positional FILE overrides source_file
- Run the pipeline over the file, export, print SUMMARY
"""

EXIT_SUCCESS_ALL = 0
EXIT_FATAL = 1
EXIT_PARTIAL_FAILURE = 2  # some rows dropped


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env via python-dotenv; failures only produce a warning."""
    try:
        if path.exists():
            load_dotenv(dotenv_path=path, override=override)
    except Exception as e:  # pragma: no cover
        print(f"WARNING: failed to load .env via python-dotenv: {e}")


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="SAFA finding spreadsheet normalizer / classifier")
    p.add_argument("file", nargs="?", help="Spreadsheet to process (overrides source_file)")
    p.add_argument("--config", help=f"Config file (default: $SAFA_CONFIG or {DEFAULT_CONFIG_PATH})")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print headers & first rows then exit")
    return p.parse_args(argv)


def _inspect_data(cfg: PipelineConfig) -> int:
    from safa_pipeline.excel.reader import ExcelReadError, SheetHeaderError, read_rows

    path = Path(cfg.source_file)
    try:
        sheet = read_rows(
            path,
            sheet_name=cfg.sheet_name,
            header_row=cfg.header_row,
            keep_na_strings=cfg.keep_na_strings or None,
        )
    except (ExcelReadError, SheetHeaderError) as e:
        print(f"inspect: {e}")
        return EXIT_FATAL
    print(f"FILE: {path.name}")
    print(f"  SHEET: {sheet.sheet_name} cols={sheet.columns} rows={len(sheet.rows)}")
    # datetime cells are not JSON friendly; show isoformat instead
    safe_rows = [
        {k: (v.isoformat() if hasattr(v, "isoformat") else v) for k, v in r.items()}
        for r in sheet.rows[:3]
    ]
    print("    sample_rows=", safe_rows)
    return EXIT_SUCCESS_ALL


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None only: an explicit [] must not fall back to sys.argv (pytest args)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"), override=True)

    if args.debug:
        for h in logger.handlers:
            h.setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)
        logger.debug("debug mode enabled")

    config_path = Path(args.config or os.getenv("SAFA_CONFIG") or DEFAULT_CONFIG_PATH)
    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL
    if args.file:
        cfg = cfg.with_source(args.file)

    if not Path(cfg.source_file).exists():
        logger.error(f"file not found: {cfg.source_file}")
        return EXIT_FATAL

    if args.inspect_data:
        return _inspect_data(cfg)

    try:
        result = process_file(cfg)
    except ProcessingError as e:
        logger.error(f"processing: {e}")
        return EXIT_FATAL

    logger.info(render_breakdown(result))
    # log_summary adds the "SUMMARY " label itself
    log_summary(render_summary_line(result).removeprefix("SUMMARY "))

    if result.has_dropped_rows:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
