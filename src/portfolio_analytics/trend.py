"""Backward-looking reconstruction of portfolio value.

For each of the past ``trend_months`` calendar months the portfolio is
re-valued from scratch as of the first day of that month. Devices bought
after that day are left out, so the portfolio grows towards the present.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date

from ..common.config import AnalyticsSettings, settings
from ..common.models import DepreciationTrendItem, DeviceRecord
from .depreciation import DepreciationModel
from .rounding import as_date, month_key, months_between, round_currency, shift_month

logger = logging.getLogger(__name__)


class TrendSimulator:
    """Rebuild monthly portfolio value and cumulative depreciation."""

    def __init__(
        self,
        config: AnalyticsSettings | None = None,
        depreciation: DepreciationModel | None = None,
    ) -> None:
        self.config = config or settings.analytics
        self.depreciation = depreciation or DepreciationModel(self.config)

    def target_dates(self, today: date) -> list[date]:
        """First day of each month in the window, oldest first, current month last."""
        today = as_date(today)
        months = self.config.trend_months
        return [shift_month(today, -offset) for offset in range(months - 1, -1, -1)]

    def value_at(self, devices: Sequence[DeviceRecord], target: date) -> DepreciationTrendItem:
        portfolio_value = 0.0
        cumulative_depreciation = 0.0

        for device in devices:
            if device.purchase_date > target:
                continue
            age = months_between(device.purchase_date, target)
            value = self.depreciation.current_value(device.purchase_price, device.category, age)
            portfolio_value += value
            cumulative_depreciation += device.purchase_price - value

        return DepreciationTrendItem(
            month=month_key(target),
            portfolio_value=round_currency(portfolio_value),
            cumulative_depreciation=round_currency(cumulative_depreciation),
        )

    def simulate(self, devices: Sequence[DeviceRecord], today: date) -> list[DepreciationTrendItem]:
        trend = [self.value_at(devices, target) for target in self.target_dates(today)]
        logger.debug(
            "Depreciation trend %s..%s over %d devices",
            trend[0].month, trend[-1].month, len(devices),
        )
        return trend
