"""Warranty status and protection valuation.

A warranty accrues 1% of the purchase price per remaining month of
coverage. While coverage is active it additionally shields the owner from
an estimated repair bill of 20% of the purchase price, including the
final expiring-soon window.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date

from ..common.config import AnalyticsSettings, settings
from ..common.models import WarrantyStatus
from .rounding import as_date


@dataclass(frozen=True)
class WarrantyValuation:
    """Unrounded warranty metrics for one device."""

    status: WarrantyStatus
    days_until_expiry: int
    warranty_value: float
    estimated_repair_cost: float

    @property
    def protection_value(self) -> float:
        # Repair savings lapse with the warranty
        if self.status is WarrantyStatus.EXPIRED:
            return self.warranty_value
        return self.warranty_value + self.estimated_repair_cost


class WarrantyValuationModel:
    """Value the remaining warranty coverage of a device."""

    def __init__(self, config: AnalyticsSettings | None = None) -> None:
        self.config = config or settings.analytics

    @staticmethod
    def days_until_expiry(warranty_expires: date, today: date) -> int:
        return math.ceil((warranty_expires - today).days)

    def status_for(self, days_until_expiry: int) -> WarrantyStatus:
        if days_until_expiry < 0:
            return WarrantyStatus.EXPIRED
        if days_until_expiry <= self.config.expiring_soon_days:
            return WarrantyStatus.EXPIRING_SOON
        return WarrantyStatus.ACTIVE

    def evaluate(self, purchase_price: float, warranty_expires: date, today: date) -> WarrantyValuation:
        if purchase_price < 0:
            raise ValueError(f"Purchase price must be non-negative: {purchase_price}")

        today = as_date(today)
        days = self.days_until_expiry(warranty_expires, today)
        monthly_value = purchase_price * self.config.monthly_warranty_rate
        remaining_months = max(0.0, days / self.config.days_per_warranty_month)

        return WarrantyValuation(
            status=self.status_for(days),
            days_until_expiry=days,
            warranty_value=monthly_value * remaining_months,
            estimated_repair_cost=purchase_price * self.config.repair_cost_percentage,
        )
