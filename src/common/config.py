"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")


def _default_depreciation_rates() -> dict[str, float]:
    return {
        "laptop": 0.25,
        "smartphone": 0.35,
        "tablet": 0.30,
        "smartwatch": 0.30,
        "headphones": 0.20,
        "camera": 0.20,
        "gaming-console": 0.15,
        "tv": 0.15,
        "other": 0.20,
    }


class AnalyticsSettings(BaseModel):
    """Constants used by the portfolio analytics engine."""
    depreciation_rates: dict[str, float] = Field(default_factory=_default_depreciation_rates)
    default_category: str = "other"
    monthly_warranty_rate: float = Field(default=0.01, ge=0)
    repair_cost_percentage: float = Field(default=0.20, ge=0)
    expiring_soon_days: int = Field(default=30, ge=0)
    days_per_warranty_month: int = Field(default=30, gt=0)
    timeline_months: int = Field(default=12, gt=0)
    trend_months: int = Field(default=24, gt=0)
    currency: str = "INR"

    @field_validator("depreciation_rates")
    @classmethod
    def _rates_in_range(cls, rates: dict[str, float]) -> dict[str, float]:
        for category, rate in rates.items():
            if not 0 <= rate < 1:
                raise ValueError(f"Depreciation rate for {category!r} must be in [0, 1): {rate}")
        return rates

    def rate_for(self, category: str) -> float:
        """Annual depreciation rate, falling back to the default category."""
        if category in self.depreciation_rates:
            return self.depreciation_rates[category]
        return self.depreciation_rates.get(self.default_category, 0.20)


class Settings(BaseModel):
    """Top-level application settings."""
    analytics: AnalyticsSettings = Field(default_factory=AnalyticsSettings)
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    @classmethod
    def load(cls, path: str | Path | None = None) -> Settings:
        """Load settings from YAML, falling back to defaults.

        Resolution order: explicit ``path``, ``PORTFOLIO_ANALYTICS_SETTINGS``,
        then config/settings.yaml.
        """
        if path is None:
            env_path = os.getenv("PORTFOLIO_ANALYTICS_SETTINGS")
            path = Path(env_path) if env_path else CONFIG_DIR / "settings.yaml"
        settings_path = Path(path)
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            return cls(**data)
        return cls()


# Singleton settings instance
settings = Settings.load()
