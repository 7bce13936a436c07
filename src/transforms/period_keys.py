"""Period key normalization.

Compact ``YYYYMM`` codes are rewritten to ``YYYY-MM`` before any
sorting, display, or CSV output.
"""

from __future__ import annotations

import re

_COMPACT_YEAR_MONTH = re.compile(r"[0-9]{6}")


def normalize_period_key(key: object) -> str | None:
    """Canonicalize a period key.

    Args:
        key: Raw period value from a record or dataset.

    Returns:
        ``YYYY-MM`` for compact six-digit codes, the string form of any
        other value, or None for missing values.
    """
    if key is None:
        return None
    text = key if isinstance(key, str) else str(key)
    if _COMPACT_YEAR_MONTH.fullmatch(text):
        return f"{text[:4]}-{text[4:]}"
    return text


def is_missing_period(key: object) -> bool:
    """Return whether a raw period value is absent or blank."""
    return key is None or (isinstance(key, str) and not key.strip())
