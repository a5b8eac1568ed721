"""Exponential depreciation of device value by category.

Formula: value = purchase_price × (1 − annual_rate) ^ (age_in_months / 12)
"""

from __future__ import annotations

import logging

from ..common.config import AnalyticsSettings, settings

logger = logging.getLogger(__name__)


class DepreciationModel:
    """Estimate what a device is worth after a number of months.

    Usage:
        model = DepreciationModel()
        value = model.current_value(100_000, "laptop", 12)  # 75000.0
    """

    def __init__(self, config: AnalyticsSettings | None = None) -> None:
        self.config = config or settings.analytics

    def annual_rate(self, category: str) -> float:
        """Annual rate for ``category``; unknown categories use the default rate."""
        key = getattr(category, "value", category)
        if key not in self.config.depreciation_rates:
            logger.debug("No depreciation rate for %r, using %r", key, self.config.default_category)
        return self.config.rate_for(key)

    def current_value(self, purchase_price: float, category: str, age_in_months: float) -> float:
        """Unrounded value after ``age_in_months``.

        Negative ages (future purchases) yield more than the purchase price;
        callers that need a bounded value clamp the age first.
        """
        if purchase_price < 0:
            raise ValueError(f"Purchase price must be non-negative: {purchase_price}")
        rate = self.annual_rate(category)
        return purchase_price * (1 - rate) ** (age_in_months / 12)
