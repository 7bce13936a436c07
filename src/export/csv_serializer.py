"""Deterministic CSV serialization.

Rows of scalar cells become one RFC-4180-style text: quoted only when
needed, rows joined by ``\\n``, no trailing newline.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from core.constants import UTF8_BOM
from core.types import CsvCell

_QUOTE_TRIGGERS = ('"', ",", "\n", "\r")


def to_csv(rows: Iterable[Sequence[CsvCell]], bom: bool = False) -> str:
    """Serialize rows into CSV text.

    Args:
        rows: Ordered rows, each an ordered sequence of scalar cells.
        bom: Prepend the UTF-8 byte-order mark for spreadsheet tools.

    Returns:
        CSV text without a trailing newline.
    """
    text = "\n".join(",".join(escape_cell(cell) for cell in row) for row in rows)
    if bom:
        return UTF8_BOM + text
    return text


def escape_cell(cell: CsvCell) -> str:
    """Render and quote one CSV cell.

    Args:
        cell: Scalar cell value; None renders empty.

    Returns:
        Cell text, wrapped in quotes with doubled inner quotes when it
        contains a quote, comma, or line break.
    """
    text = format_cell(cell)
    if any(trigger in text for trigger in _QUOTE_TRIGGERS):
        return '"' + text.replace('"', '""') + '"'
    return text


def format_cell(cell: CsvCell) -> str:
    """Render a scalar cell as text without quoting."""
    if cell is None:
        return ""
    if isinstance(cell, bool):
        return "true" if cell else "false"
    if isinstance(cell, float) and math.isfinite(cell) and cell.is_integer():
        return str(int(cell))
    return str(cell)
