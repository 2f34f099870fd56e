"""Field normalizers: column resolution, dates, free text, ATA and tail numbers."""

from .columns import COLUMN_ALIASES, build_alias_table, resolve_columns
from .dates import parse_date
from .fields import UNKNOWN, normalize_aircraft, normalize_ata
from .text import clean_desc

__all__ = [
    "COLUMN_ALIASES",
    "UNKNOWN",
    "build_alias_table",
    "clean_desc",
    "normalize_aircraft",
    "normalize_ata",
    "parse_date",
    "resolve_columns",
]
