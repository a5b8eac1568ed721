"""Tests for the depreciation trend simulator."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from src.common.models import DeviceRecord
from src.portfolio_analytics.trend import TrendSimulator


class TestTrendSimulator:
    def test_empty_portfolio_has_24_zero_months(self, analytics_config, today):
        trend = TrendSimulator(analytics_config).simulate([], today)

        assert len(trend) == 24
        assert all(item.portfolio_value == 0 for item in trend)
        assert all(item.cumulative_depreciation == 0 for item in trend)

    def test_month_keys(self, analytics_config, today):
        trend = TrendSimulator(analytics_config).simulate([], today)

        assert trend[0].month == "2024-03"
        assert trend[-1].month == "2026-02"
        assert [item.month for item in trend] == sorted(item.month for item in trend)
        assert "2025-01" in [item.month for item in trend]

    def test_target_dates_are_month_starts(self, analytics_config):
        dates = TrendSimulator(analytics_config).target_dates(date(2026, 1, 31))
        assert dates[0] == date(2024, 2, 1)
        assert dates[-2] == date(2025, 12, 1)
        assert dates[-1] == date(2026, 1, 1)

    def test_single_laptop(self, analytics_config, make_device, today):
        device = make_device(purchase_price=100_000, purchase_date=date(2025, 2, 15))
        trend = {item.month: item for item in TrendSimulator(analytics_config).simulate([device], today)}

        # Bought mid-month, so absent at the start of February 2025
        assert trend["2025-02"].portfolio_value == 0
        assert trend["2025-03"].portfolio_value == pytest.approx(100_000 * 0.75 ** (1 / 12), abs=1)
        assert trend["2026-02"].portfolio_value == 75_000
        assert trend["2026-02"].cumulative_depreciation == 25_000

    def test_purchase_on_month_start_is_included(self, analytics_config, make_device, today):
        device = make_device(purchase_price=10_000, purchase_date=date(2025, 6, 1))
        trend = {item.month: item for item in TrendSimulator(analytics_config).simulate([device], today)}

        assert trend["2025-05"].portfolio_value == 0
        assert trend["2025-06"].portfolio_value == 10_000
        assert trend["2025-06"].cumulative_depreciation == 0

    def test_portfolio_grows_towards_present(self, analytics_config, make_device, today):
        devices = [
            make_device(category="tv", purchase_price=80_000, purchase_date=date(2023, 1, 10)),
            make_device(category="smartphone", purchase_price=90_000, purchase_date=date(2025, 9, 1)),
        ]
        trend = {item.month: item for item in TrendSimulator(analytics_config).simulate(devices, today)}

        assert trend["2025-09"].portfolio_value > trend["2025-08"].portfolio_value
        # The TV alone keeps losing value before the phone arrives
        assert trend["2025-08"].portfolio_value < trend["2024-03"].portfolio_value

    def test_value_plus_depreciation_equals_price(self, analytics_config, make_device, today):
        devices = [
            make_device(purchase_price=100_000, purchase_date=date(2023, 4, 1)),
            make_device(category="camera", purchase_price=45_000, purchase_date=date(2024, 6, 1)),
        ]
        for item in TrendSimulator(analytics_config).simulate(devices, today):
            owned = 145_000 if item.month >= "2024-06" else 100_000
            assert item.portfolio_value + item.cumulative_depreciation == pytest.approx(owned, abs=1)

    def test_length_independent_of_portfolio_size(self, analytics_config, today):
        devices = [
            DeviceRecord(
                id=str(i),
                name=f"Device {i}",
                category="other",
                purchase_price=1_000 + i,
                purchase_date=date(2020 + i % 6, i % 12 + 1, 1),
                warranty_expires=date(2027, 1, 1),
            )
            for i in range(1000)
        ]
        assert len(TrendSimulator(analytics_config).simulate(devices, today)) == 24

    def test_accepts_datetime_today(self, analytics_config, make_device, today):
        device = make_device(purchase_price=100_000, purchase_date=date(2025, 2, 15))
        simulator = TrendSimulator(analytics_config)
        late = datetime(today.year, today.month, today.day, 23, 59)

        assert simulator.simulate([device], late) == simulator.simulate([device], today)
