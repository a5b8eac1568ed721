"""Shared test fixtures for the portfolio analytics engine."""

import sys
from datetime import date
from pathlib import Path

import pytest

# Ensure src is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.common.config import AnalyticsSettings
from src.common.models import DeviceRecord


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def today() -> date:
    """Fixed evaluation date so every computation is reproducible."""
    return date(2026, 2, 15)


@pytest.fixture
def analytics_config() -> AnalyticsSettings:
    """Default analytics constants, independent of any local YAML."""
    return AnalyticsSettings()


@pytest.fixture
def make_device():
    """Factory for DeviceRecord with sensible defaults."""
    counter = {"n": 0}

    def _make(**overrides) -> DeviceRecord:
        counter["n"] += 1
        data = {
            "id": f"dev-{counter['n']}",
            "name": f"Device {counter['n']}",
            "category": "laptop",
            "purchase_price": 100_000,
            "purchase_date": date(2025, 2, 15),
            "warranty_expires": date(2027, 2, 15),
        }
        data.update(overrides)
        return DeviceRecord(**data)

    return _make


@pytest.fixture
def sample_repository_payload() -> list[dict]:
    """Devices as the repository returns them (camelCase, ISO strings)."""
    return [
        {
            "id": "d1",
            "name": "MacBook Pro 14",
            "category": "laptop",
            "manufacturer": "Apple",
            "purchaseDate": "2025-02-10",
            "purchasePrice": 200000,
            "warrantyExpires": "2027-02-10",
            "status": "active",
        },
        {
            "id": "d2",
            "name": "Pixel 8",
            "category": "smartphone",
            "purchaseDate": "2024-08-01",
            "purchasePrice": 60000,
            "warrantyExpires": "2026-03-01",
            "status": "expiring-soon",
        },
        {
            "id": "d3",
            "name": "Sony WH-1000XM4",
            "category": "headphones",
            "purchaseDate": "2022-11-20",
            "purchasePrice": 25000,
            "warrantyExpires": "2023-11-20",
            "status": "expired",
        },
        {
            "id": "d4",
            "name": "Gifted Kindle",
            "category": "e-reader",
            "purchaseDate": "2025-12-25",
            "warrantyExpires": "2026-12-25",
            "status": "active",
        },
    ]
