"""Forward-looking warranty expiration timeline."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from ..common.config import AnalyticsSettings, settings
from ..common.models import DeviceAnalytics, DeviceRecord, WarrantyStatus, WarrantyTimelineItem
from .rounding import as_date, month_key


class TimelineProjector:
    """Bucket upcoming warranty expirations by calendar month."""

    def __init__(self, config: AnalyticsSettings | None = None) -> None:
        self.config = config or settings.analytics

    def project(
        self,
        devices: Sequence[DeviceRecord],
        analytics: Sequence[DeviceAnalytics],
        today: date,
    ) -> list[WarrantyTimelineItem]:
        """Build up to ``timeline_months`` buckets in chronological order.

        ``analytics[i]`` must describe ``devices[i]``.
        """
        today = as_date(today)
        if len(devices) != len(analytics):
            raise ValueError(
                f"Got {len(devices)} devices but {len(analytics)} analytics records"
            )

        buckets: dict[str, dict] = {}
        for device, item in zip(devices, analytics):
            if item.warranty_status is WarrantyStatus.EXPIRED:
                continue
            if device.warranty_expires < today:
                continue

            key = month_key(device.warranty_expires)
            bucket = buckets.setdefault(key, {
                "month": key,
                "expiring_count": 0,
                "expiring_value": 0,
                "device_names": [],
            })
            bucket["expiring_count"] += 1
            bucket["expiring_value"] += item.warranty_value
            bucket["device_names"].append(device.name)

        # YYYY-MM keys sort chronologically as strings
        ordered = sorted(buckets.values(), key=lambda b: b["month"])
        return [
            WarrantyTimelineItem(**{**bucket, "device_names": tuple(bucket["device_names"])})
            for bucket in ordered[: self.config.timeline_months]
        ]
