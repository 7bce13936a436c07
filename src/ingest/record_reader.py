"""Record source readers.

This module parses line-delimited JSON rows and single JSON documents.
Parsing is all-or-nothing: one bad line fails the whole read.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from core.errors import MalformedRecordError
from core.types import SummaryDocument


def read_line_delimited(text: str) -> list[Any]:
    """Parse newline-delimited JSON into rows.

    Args:
        text: Raw response body, one JSON value per line.

    Returns:
        Parsed values in line order; blank lines are skipped.

    Raises:
        MalformedRecordError: If any non-blank line is not valid JSON.
    """
    rows: list[Any] = []
    for line_index, line in enumerate(text.split("\n")):
        if not line.strip():
            continue
        rows.append(_parse_line(line, line_index))
    return rows


def read_document(text: str) -> Any:
    """Parse a whole JSON document.

    Args:
        text: Raw response body.

    Returns:
        Parsed JSON value.

    Raises:
        MalformedRecordError: If the document is not valid JSON.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as error:
        raise MalformedRecordError(
            f"Failed to parse JSON document: {_describe_parse_error(error)}. "
            "Check that the source serves a single JSON value."
        ) from error


def parse_summary_document(payload: object) -> SummaryDocument | None:
    """Validate an optional summary document payload.

    Args:
        payload: Parsed ``{summary_text, latest_3_months}`` document.

    Returns:
        Summary model, or None when the payload carries nothing usable.
    """
    if not isinstance(payload, Mapping):
        return None
    summary_text = payload.get("summary_text")
    months = payload.get("latest_3_months")
    text_value = summary_text if isinstance(summary_text, str) else ""
    month_values = tuple(str(month) for month in months) if isinstance(months, list) else ()
    if not text_value and not month_values:
        return None
    return SummaryDocument(summary_text=text_value, latest_months=month_values)


def _parse_line(line: str, line_index: int) -> Any:
    """Parse one record line.

    Args:
        line: Raw JSON text line.
        line_index: Zero-based physical line index.

    Returns:
        Parsed JSON value.

    Raises:
        MalformedRecordError: If the line is invalid.
    """
    try:
        return json.loads(line, parse_constant=_reject_constant)
    except ValueError as error:
        raise MalformedRecordError(
            f"Failed to parse line-delimited record at line {line_index + 1}: "
            f"{_describe_parse_error(error)}. Fix the JSON syntax of that line and retry.",
            line_index=line_index,
        ) from error


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant '{name}'")


def _describe_parse_error(error: ValueError) -> str:
    if isinstance(error, json.JSONDecodeError):
        return f"{error.msg} at line {error.lineno} column {error.colno}"
    return str(error)
