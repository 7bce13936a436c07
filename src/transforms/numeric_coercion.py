"""Numeric coercion for untrusted metric values.

Every aggregator reads metrics through ``to_count`` so the
missing-is-zero policy is enforced in one place.
"""

from __future__ import annotations

from decimal import Decimal
import math
from numbers import Real

from core.types import Count


def to_count(value: object) -> Count:
    """Coerce an arbitrary value into a finite count.

    Args:
        value: Raw metric value of unknown shape.

    Returns:
        The finite numeric interpretation of ``value``, as ``int`` when
        integral, else ``float``. Zero for None, blank or non-numeric
        strings, NaN, infinities, and non-scalar values.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, (Real, Decimal)):
        try:
            return _finite_or_zero(float(value))
        except (OverflowError, ValueError):
            return 0
    if isinstance(value, str):
        return _parse_numeric_text(value)
    return 0


def _parse_numeric_text(text: str) -> Count:
    """Parse a decimal string, returning 0 when it is not a number."""
    stripped = text.strip()
    if not stripped or "_" in stripped:
        return 0
    try:
        parsed = float(stripped)
    except ValueError:
        return 0
    return _finite_or_zero(parsed)


def _finite_or_zero(number: float) -> Count:
    if not math.isfinite(number):
        return 0
    if number.is_integer():
        return int(number)
    return number
