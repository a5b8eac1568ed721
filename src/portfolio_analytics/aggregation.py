"""Category breakdown of per-device analytics."""

from __future__ import annotations

from collections.abc import Iterable

from ..common.models import CategoryBreakdown, DeviceAnalytics, DeviceCategory
from .rounding import round_amount


class CategoryAggregator:
    """Group device analytics by category, largest total value first."""

    def aggregate(self, analytics: Iterable[DeviceAnalytics]) -> list[CategoryBreakdown]:
        # Dict order preserves first occurrence; sorted() is stable for ties
        groups: dict[DeviceCategory, dict] = {}
        for item in analytics:
            group = groups.setdefault(item.category, {
                "category": item.category,
                "device_count": 0,
                "total_value": 0,
                "current_value": 0,
                "depreciation_amount": 0,
                "warranty_value": 0,
            })
            group["device_count"] += 1
            group["total_value"] += item.purchase_price
            group["current_value"] += item.current_value
            group["depreciation_amount"] += item.depreciation_amount
            group["warranty_value"] += item.warranty_value

        rows = [
            CategoryBreakdown(**{**group, "total_value": round_amount(group["total_value"])})
            for group in groups.values()
        ]
        return sorted(rows, key=lambda row: row.total_value, reverse=True)
