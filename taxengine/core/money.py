# taxengine/core/money.py
"""
Decimal helpers shared by the calculators and return composers.

Amounts are carried as exact ``Decimal`` values and rounded to paise
(two places, half away from zero) only when a value is emitted.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Annotated, Any

from pydantic import PlainSerializer

ZERO = Decimal("0")
PAISE = Decimal("0.01")


def to_decimal(value: Any) -> Decimal:
    """Convert ints, floats, strings and Decimals to Decimal via ``str``.

    ``None`` is treated as zero. Anything else that cannot be parsed
    raises ``ValueError``.
    """
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Not a monetary amount: {value!r}")
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise ValueError(f"Not a monetary amount: {value!r}") from exc


def round2(value: Any) -> Decimal:
    """Round to 2 decimal places, half away from zero."""
    return to_decimal(value).quantize(PAISE, rounding=ROUND_HALF_UP)


# Decimal inside the engine, a JSON number in exported payloads
Money = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]
