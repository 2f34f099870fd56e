from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

"""Config loader for the SAFA pipeline.

Responsibilities:
- Load YAML (default config/safa.yml)
- Validate against the packaged JSON schema
- Apply defaults (header_row=1, language=en, logs_dir=./logs)
"""

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
DEFAULT_CONFIG_PATH = Path("config/safa.yml")


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class OutputConfig:
    csv: str | None = None
    xlsx: str | None = None

    def paths(self) -> list[Path]:
        return [Path(p) for p in (self.csv, self.xlsx) if p]


@dataclass(frozen=True)
class PipelineConfig:
    source_file: str
    sheet_name: str | None = None
    header_row: int = 1
    language: str = "en"
    column_aliases: dict[str, list[str]] = field(default_factory=dict)
    keep_na_strings: list[str] = field(default_factory=list)
    logs_dir: str = "./logs"
    output: OutputConfig = field(default_factory=OutputConfig)

    def with_source(self, source_file: str) -> PipelineConfig:
        return replace(self, source_file=source_file)


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: schema file missing or invalid, or data fails validation
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")
    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> PipelineConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)

    out_raw = data.get("output") or {}
    return PipelineConfig(
        source_file=data["source_file"],
        sheet_name=data.get("sheet_name"),
        header_row=data.get("header_row", 1),
        language=data.get("language", "en"),
        column_aliases=dict(data.get("column_aliases") or {}),
        keep_na_strings=list(data.get("keep_na_strings") or []),
        logs_dir=data.get("logs_dir", "./logs"),
        output=OutputConfig(csv=out_raw.get("csv"), xlsx=out_raw.get("xlsx")),
    )
