"""Dashboard-facing classifications and formatting of computed analytics."""

from __future__ import annotations

import re
from enum import Enum

from ..common.models import DeviceCategory, PortfolioAnalytics
from .rounding import round_currency

_MONTH_KEY_RE = re.compile(r"^(\d{4})-(\d{2})$")
_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
               "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

CATEGORY_LABELS: dict[DeviceCategory, str] = {
    DeviceCategory.LAPTOP: "Laptop",
    DeviceCategory.SMARTPHONE: "Smartphone",
    DeviceCategory.TABLET: "Tablet",
    DeviceCategory.SMARTWATCH: "Smartwatch",
    DeviceCategory.HEADPHONES: "Headphones",
    DeviceCategory.CAMERA: "Camera",
    DeviceCategory.GAMING_CONSOLE: "Gaming Console",
    DeviceCategory.TV: "TV",
    DeviceCategory.OTHER: "Other",
}

CURRENCY_SYMBOLS = {"INR": "₹", "USD": "$", "EUR": "€", "GBP": "£"}


class Severity(str, Enum):
    """Badge variant shown next to a metric."""
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


def depreciation_severity(percentage: float) -> Severity:
    if percentage < 15:
        return Severity.SUCCESS
    if percentage < 30:
        return Severity.WARNING
    return Severity.ERROR


def warranty_coverage_health(active: int, total: int) -> Severity:
    """Severity of the share of devices with an active warranty."""
    if total <= 0:
        return Severity.ERROR
    share = active / total * 100
    if share >= 70:
        return Severity.SUCCESS
    if share >= 40:
        return Severity.WARNING
    return Severity.ERROR


def category_label(category: object) -> str:
    return CATEGORY_LABELS[DeviceCategory.parse(category)]


def max_category_value(analytics: PortfolioAnalytics) -> float:
    if not analytics.category_breakdown:
        return 0
    return max(row.total_value for row in analytics.category_breakdown)


def category_share(value: float, max_value: float) -> float:
    """Bar length of ``value`` as a percent of the largest category."""
    if max_value == 0:
        return 0.0
    return value / max_value * 100


def _group_digits(digits: str, indian: bool) -> str:
    if not indian or len(digits) <= 3:
        return f"{int(digits):,}"
    # Lakh/crore grouping: last three digits, then pairs
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_currency(value: float, currency: str = "INR") -> str:
    """Whole-unit amount with the currency symbol, e.g. ``₹1,23,456``."""
    amount = round_currency(abs(value))
    sign = "-" if value < 0 and amount else ""
    symbol = CURRENCY_SYMBOLS.get(currency.upper(), f"{currency.upper()} ")
    return f"{sign}{symbol}{_group_digits(str(amount), currency.upper() == 'INR')}"


def format_percentage(value: float) -> str:
    return f"{value:.1f}%"


def format_month(key: str) -> str:
    """``2026-02`` -> ``Feb 2026``."""
    match = _MONTH_KEY_RE.match(key)
    if not match or not 1 <= int(match.group(2)) <= 12:
        raise ValueError(f"Invalid month key: {key!r}")
    return f"{_MONTH_ABBR[int(match.group(2)) - 1]} {match.group(1)}"
