"""Per-device analytics: depreciation combined with warranty valuation."""

from __future__ import annotations

import logging
from datetime import date

from ..common.config import AnalyticsSettings, settings
from ..common.models import DeviceAnalytics, DeviceRecord
from .depreciation import DepreciationModel
from .rounding import as_date, months_between, percentage, round_currency
from .warranty import WarrantyValuationModel

logger = logging.getLogger(__name__)


class DeviceAnalyticsCalculator:
    """Compute the DeviceAnalytics record for a single device.

    Usage:
        calc = DeviceAnalyticsCalculator()
        analytics = calc.compute(device, today=date(2026, 2, 1))
        print(f"Worth {analytics.current_value:,} ({analytics.depreciation_percentage}% lost)")
    """

    def __init__(
        self,
        config: AnalyticsSettings | None = None,
        depreciation: DepreciationModel | None = None,
        warranty: WarrantyValuationModel | None = None,
    ) -> None:
        self.config = config or settings.analytics
        self.depreciation = depreciation or DepreciationModel(self.config)
        self.warranty = warranty or WarrantyValuationModel(self.config)

    @staticmethod
    def device_age(device: DeviceRecord, today: date) -> int:
        """Age in whole months; devices bought in the future count as new."""
        return max(0, months_between(device.purchase_date, today))

    def compute(self, device: DeviceRecord, today: date) -> DeviceAnalytics:
        today = as_date(today)
        purchase_price = device.purchase_price
        age = self.device_age(device, today)

        current_value = round_currency(
            self.depreciation.current_value(purchase_price, device.category, age)
        )
        # Never above the price paid, even for fractional prices
        current_value = min(current_value, int(purchase_price))
        # Percentage uses the exact loss, the reported amount is whole units
        depreciation = purchase_price - current_value

        valuation = self.warranty.evaluate(purchase_price, device.warranty_expires, today)

        analytics = DeviceAnalytics(
            device_id=device.id,
            device_name=device.name,
            category=device.category,
            purchase_price=purchase_price,
            current_value=current_value,
            depreciation_amount=round_currency(depreciation),
            depreciation_percentage=percentage(depreciation, purchase_price),
            warranty_value=round_currency(valuation.warranty_value),
            warranty_status=valuation.status,
            days_until_expiry=valuation.days_until_expiry,
            estimated_repair_cost=round_currency(valuation.estimated_repair_cost),
            protection_value=round_currency(valuation.protection_value),
        )
        logger.debug(
            "%s: age=%d mo, value=%s/%s, warranty=%s (%d days)",
            device.name,
            age,
            f"{current_value:,}",
            f"{purchase_price:,.0f}",
            valuation.status.value,
            valuation.days_until_expiry,
        )
        return analytics
