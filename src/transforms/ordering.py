"""Ordering policy for periods and categories.

Periods sort chronologically with a numeric-aware key; categories sort
lexically. Both are deterministic and independent of input order.
"""

from __future__ import annotations

import re
from typing import Iterable

_DIGIT_RUN = re.compile(r"([0-9]+)")
_NUMERIC_KEY = re.compile(r"[0-9]+")


def period_sort_key(period: str) -> tuple[tuple[int, int, str], ...]:
    """Build a numeric-aware sort key for a period label.

    Digit runs compare as integers and other runs compare lexically,
    so ``2024-2`` sorts before ``2024-10``.

    Args:
        period: Normalized period label.

    Returns:
        Comparable tuple key.
    """
    parts: list[tuple[int, int, str]] = []
    for chunk in _DIGIT_RUN.split(period):
        if not chunk:
            continue
        if _DIGIT_RUN.fullmatch(chunk):
            parts.append((0, int(chunk), chunk))
        else:
            parts.append((1, 0, chunk))
    return tuple(parts)


def order_periods(periods: Iterable[str]) -> list[str]:
    """Return unique periods in ascending chronological order."""
    return sorted(set(periods), key=period_sort_key)


def is_numeric_period_key(key: object) -> bool:
    """Return whether a dataset key is a digit-only period."""
    return isinstance(key, str) and bool(_NUMERIC_KEY.fullmatch(key))


def numeric_period_keys(keys: Iterable[object]) -> list[str]:
    """Filter digit-only period keys and order them by integer value.

    Args:
        keys: Top-level keys of a nested dataset.

    Returns:
        Ascending numeric keys; non-numeric keys are dropped.
    """
    numeric_keys = [key for key in keys if is_numeric_period_key(key)]
    return sorted(numeric_keys, key=lambda key: (int(key), key))


def order_categories(categories: Iterable[str]) -> list[str]:
    """Return unique categories in lexical ascending order."""
    return sorted(set(categories))
