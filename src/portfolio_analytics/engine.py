"""Portfolio analytics orchestrator.

Runs the per-device calculator over a snapshot of the user's devices and
feeds the results to the category, timeline and trend aggregators. The
engine is a pure function of ``(devices, today)``: callers re-invoke
``analyze`` whenever they observe a new device snapshot.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date

from ..common.config import AnalyticsSettings, settings
from ..common.models import DeviceAnalytics, DeviceRecord, PortfolioAnalytics, WarrantyStatus
from .aggregation import CategoryAggregator
from .calculator import DeviceAnalyticsCalculator
from .depreciation import DepreciationModel
from .rounding import as_date, percentage, round_currency, round_one_decimal
from .timeline import TimelineProjector
from .trend import TrendSimulator
from .warranty import WarrantyValuationModel

logger = logging.getLogger(__name__)

DeviceInput = DeviceRecord | Mapping


class PortfolioAnalyticsEngine:
    """Compute PortfolioAnalytics for a collection of devices.

    Usage:
        engine = PortfolioAnalyticsEngine()
        result = engine.analyze(devices, today=date.today())
        print(f"Portfolio worth {result.total_current_value:,}")

    Devices may be DeviceRecord instances or raw repository dicts
    (camelCase keys). A malformed device raises and aborts the whole run.
    """

    def __init__(self, config: AnalyticsSettings | None = None) -> None:
        self.config = config or settings.analytics
        depreciation = DepreciationModel(self.config)
        self.calculator = DeviceAnalyticsCalculator(
            self.config,
            depreciation=depreciation,
            warranty=WarrantyValuationModel(self.config),
        )
        self.categories = CategoryAggregator()
        self.timeline = TimelineProjector(self.config)
        self.trend = TrendSimulator(self.config, depreciation=depreciation)

    @staticmethod
    def coerce_devices(devices: Iterable[DeviceInput]) -> list[DeviceRecord]:
        """Validate every input up front; the first bad record raises."""
        return [
            device if isinstance(device, DeviceRecord) else DeviceRecord.model_validate(device)
            for device in devices
        ]

    def device_analytics(
        self,
        devices: Iterable[DeviceInput],
        device_id: str,
        today: date,
    ) -> DeviceAnalytics | None:
        """Analytics for the device with ``device_id``, or None if absent."""
        today = as_date(today)
        for device in self.coerce_devices(devices):
            if device.id == device_id:
                return self.calculator.compute(device, today)
        return None

    def analyze(self, devices: Iterable[DeviceInput], today: date) -> PortfolioAnalytics:
        today = as_date(today)
        records = self.coerce_devices(devices)

        if not records:
            logger.info("Empty portfolio as of %s", today.isoformat())
            return PortfolioAnalytics.empty(tuple(self.trend.simulate([], today)))

        analytics = [self.calculator.compute(device, today) for device in records]

        total_purchase = sum(a.purchase_price for a in analytics)
        total_current = sum(a.current_value for a in analytics)
        total_depreciation = total_purchase - total_current
        total_warranty = sum(a.warranty_value for a in analytics)
        total_protection = sum(a.protection_value for a in analytics)

        statuses = [a.warranty_status for a in analytics]
        ages = [self.calculator.device_age(device, today) for device in records]

        result = PortfolioAnalytics(
            total_devices=len(records),
            total_purchase_value=round_currency(total_purchase),
            total_current_value=round_currency(total_current),
            total_depreciation=round_currency(total_depreciation),
            total_depreciation_percentage=percentage(total_depreciation, total_purchase),
            total_warranty_value=round_currency(total_warranty),
            total_protection_value=round_currency(total_protection),
            active_warranties=statuses.count(WarrantyStatus.ACTIVE),
            expiring_warranties=statuses.count(WarrantyStatus.EXPIRING_SOON),
            expired_warranties=statuses.count(WarrantyStatus.EXPIRED),
            average_device_age=round_one_decimal(sum(ages) / len(ages)),
            category_breakdown=tuple(self.categories.aggregate(analytics)),
            warranty_timeline=tuple(self.timeline.project(records, analytics, today)),
            depreciation_trend=tuple(self.trend.simulate(records, today)),
        )

        logger.info(
            "Portfolio as of %s: %d devices, purchase=%s, current=%s (-%.1f%%), protection=%s",
            today.isoformat(),
            result.total_devices,
            f"{result.total_purchase_value:,}",
            f"{result.total_current_value:,}",
            result.total_depreciation_percentage,
            f"{result.total_protection_value:,}",
        )
        return result
