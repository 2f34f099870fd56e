from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from ..errors import MissingColumnError

"""Column resolver: spreadsheet headers -> canonical field names.

Headers are compared after ``strip().lower()``. For each canonical field the
first alias (in priority order) present in the header set wins. Only ``date``
and ``description`` are mandatory.
"""

__all__ = [
    "COLUMN_ALIASES",
    "REQUIRED_FIELDS",
    "normalize_header",
    "normalize_row_keys",
    "build_alias_table",
    "resolve_columns",
]

COLUMN_ALIASES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("wo_number", ("w/o number", "wo number", "work order", "wo", "w/o")),
    ("date", ("w/o date", "wo date", "date", "tarih")),
    ("ata", ("ata", "ata code", "ata chapter")),
    ("aircraft", ("a/c", "ac", "aircraft", "registration", "tail number")),
    ("paragraph", ("paragraph no", "paragraph", "parag", "parag no")),
    ("description", ("description", "aciklama", "finding", "desc")),
)

REQUIRED_FIELDS = ("date", "description")


def normalize_header(header: Any) -> str:
    return str(header).strip().lower()


def normalize_row_keys(row: Mapping[Any, Any]) -> dict[str, Any]:
    """Return a copy of ``row`` keyed by normalized header.

    On a collision after normalization the last column wins.
    """
    return {normalize_header(k): v for k, v in row.items()}


def build_alias_table(
    extra_aliases: Mapping[str, Iterable[str]] | None = None,
) -> tuple[tuple[str, tuple[str, ...]], ...]:
    """Built-in aliases with optional extras appended after them.

    Unknown field names in ``extra_aliases`` are ignored.
    """
    if not extra_aliases:
        return COLUMN_ALIASES
    table = []
    for field, aliases in COLUMN_ALIASES:
        extras = tuple(
            normalize_header(a)
            for a in extra_aliases.get(field, ())
            if normalize_header(a) not in aliases
        )
        table.append((field, aliases + extras))
    return tuple(table)


def resolve_columns(
    headers: Iterable[str],
    aliases: tuple[tuple[str, tuple[str, ...]], ...] = COLUMN_ALIASES,
    *,
    language: str = "en",
) -> dict[str, str]:
    """Map canonical fields to the header actually present.

    Parameters
    ----------
    headers: header names of the first row (normalized or not)
    aliases: ordered alias table, see ``build_alias_table``
    language: language of the error message

    Raises
    ------
    MissingColumnError: date or description could not be resolved
    """
    available = {normalize_header(h) for h in headers}
    column_map: dict[str, str] = {}
    for field, candidates in aliases:
        for alias in candidates:
            if alias in available:
                column_map[field] = alias
                break
    for field in REQUIRED_FIELDS:
        if field not in column_map:
            raise MissingColumnError(field, language=language)
    return column_map
