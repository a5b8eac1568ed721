"""Rounding and calendar helpers shared by the analytics components."""

from __future__ import annotations

import math
from datetime import date, datetime


def round_currency(value: float) -> int:
    """Round to the nearest whole currency unit, halves rounding up."""
    return math.floor(value + 0.5)


def round_one_decimal(value: float) -> float:
    """Round to one decimal place, halves rounding up."""
    return math.floor(value * 10 + 0.5) / 10


def round_amount(value: float) -> int | float:
    """Sum of prices trimmed to cents; whole amounts come back as ints."""
    value = round(value, 2)
    if float(value).is_integer():
        return int(value)
    return value


def percentage(part: float, total: float) -> float:
    """``part / total * 100`` rounded to one decimal, 0 when total is 0."""
    if total == 0:
        return 0.0
    return round_one_decimal(part / total * 100)


def months_between(start: date, end: date) -> int:
    """Whole calendar months from ``start`` to ``end``.

    Day-of-month is ignored: any month boundary crossed counts as a month.
    """
    return (end.year - start.year) * 12 + (end.month - start.month)


def month_key(day: date) -> str:
    """``YYYY-MM`` key for the month containing ``day``."""
    return f"{day.year}-{day.month:02d}"


def shift_month(day: date, months: int) -> date:
    """First day of the month ``months`` away from the month of ``day``."""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def as_date(today: date) -> date:
    """Normalise the evaluation instant to a calendar date."""
    if isinstance(today, datetime):
        return today.date()
    if isinstance(today, date):
        return today
    raise TypeError(f"Expected date or datetime for 'today', got {type(today).__name__}")
