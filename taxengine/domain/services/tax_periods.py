# taxengine/domain/services/tax_periods.py
"""
Filing-period helpers shared by the return composers.

GST returns are monthly ("MMYYYY"); TDS returns are quarterly within an
April-March financial year.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from taxengine.domain.models.tax_tables import QUARTER_MONTHS, Quarter


def return_period(month: int, year: int) -> str:
    """(11, 2025) -> "112025"."""
    month, year = int(month), int(year)
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month: {month}")
    return f"{month:02d}{year}"


def period_from(period: Any) -> tuple[int, int]:
    """Accept ``{"month": m, "year": y}``, a ``(month, year)`` pair or a date."""
    if isinstance(period, date):
        return period.month, period.year
    if isinstance(period, dict):
        return int(period["month"]), int(period["year"])
    month, year = period
    return int(month), int(year)


def assessment_year_for(financial_year: str) -> str:
    """
    Convert Financial Year to Assessment Year.

    "2023-24" -> "2024-25", "2023-2024" -> "2024-2025".
    """
    parts = (financial_year or "").strip().split("-")
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise ValueError(f"Invalid financial year: {financial_year!r}")

    start, end = parts
    next_start = int(start) + 1
    if len(end) == 2:
        return f"{next_start}-{(int(end) + 1) % 100:02d}"
    return f"{next_start}-{int(end) + 1}"


def as_quarter(quarter: Quarter | str) -> Quarter:
    try:
        return Quarter(str(quarter.value if isinstance(quarter, Quarter) else quarter).strip().upper())
    except ValueError as exc:
        raise ValueError(f"Invalid quarter: {quarter!r}") from exc


def in_quarter(day: date, quarter: Quarter) -> bool:
    return day.month in QUARTER_MONTHS[quarter]
