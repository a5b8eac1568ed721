# Common utilities and shared modules
"""
Shared components used by the analytics engine:
- Data models (Pydantic schemas)
- Logging configuration
- Project configuration
"""

from .config import settings, AnalyticsSettings, Settings, PROJECT_ROOT, CONFIG_DIR
from .logging import setup_logging

__all__ = [
    "settings",
    "AnalyticsSettings",
    "Settings",
    "PROJECT_ROOT",
    "CONFIG_DIR",
    "setup_logging",
]
