"""
Portfolio Analytics Engine

Modules:
- depreciation: Category-based exponential value decay
- warranty: Warranty status, accrued warranty value and protection value
- calculator: Per-device analytics combining the two models
- aggregation: Category breakdown
- timeline: Upcoming warranty expirations by month
- trend: 24-month portfolio value reconstruction
- engine: Orchestrator producing PortfolioAnalytics
- insights: Severity badges and display formatting
"""

from .aggregation import CategoryAggregator
from .calculator import DeviceAnalyticsCalculator
from .depreciation import DepreciationModel
from .engine import PortfolioAnalyticsEngine
from .timeline import TimelineProjector
from .trend import TrendSimulator
from .warranty import WarrantyValuation, WarrantyValuationModel

__version__ = "0.1.0"

__all__ = [
    "CategoryAggregator",
    "DeviceAnalyticsCalculator",
    "DepreciationModel",
    "PortfolioAnalyticsEngine",
    "TimelineProjector",
    "TrendSimulator",
    "WarrantyValuation",
    "WarrantyValuationModel",
]
