"""Shared Pydantic data models for the portfolio analytics engine.

These models define the data contracts between the device repository
(input) and the presentation layer (output). All modules import from here.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Annotated, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# Whole amounts stay ints; fractional amounts must be finite
Amount = Union[
    Annotated[int, Field(ge=0)],
    Annotated[float, Field(ge=0, allow_inf_nan=False)],
]


# === Enums ===

class DeviceCategory(str, Enum):
    """Device categories known to the depreciation table."""
    LAPTOP = "laptop"
    SMARTPHONE = "smartphone"
    TABLET = "tablet"
    SMARTWATCH = "smartwatch"
    HEADPHONES = "headphones"
    CAMERA = "camera"
    GAMING_CONSOLE = "gaming-console"
    TV = "tv"
    OTHER = "other"

    @classmethod
    def parse(cls, value: object) -> DeviceCategory:
        """Map a raw category to a member; unknown values become OTHER."""
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.OTHER
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.OTHER


class WarrantyStatus(str, Enum):
    """Warranty coverage state relative to the evaluation date."""
    ACTIVE = "active"
    EXPIRING_SOON = "expiring-soon"
    EXPIRED = "expired"


def parse_calendar_date(value: object) -> date:
    """Coerce an ISO string, date or datetime to a calendar date.

    Raises:
        ValueError: If the value is not a recognisable date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text).date()
        except ValueError as exc:
            raise ValueError(f"Unparseable date: {value!r}") from exc
    raise ValueError(f"Expected a date, got {type(value).__name__}: {value!r}")


class _ContractModel(BaseModel):
    """Immutable model exposed with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


# === Input ===

class DeviceRecord(_ContractModel):
    """A tracked device as supplied by the device repository."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    category: DeviceCategory = DeviceCategory.OTHER
    purchase_price: Amount = Field(default=0, description="Purchase price in currency units")
    purchase_date: date
    warranty_expires: date
    manufacturer: str | None = None
    model: str | None = None
    serial_number: str | None = None
    warranty_provider: str | None = None
    notes: str | None = None

    @field_validator("category", mode="before")
    @classmethod
    def _normalise_category(cls, value: object) -> DeviceCategory:
        return DeviceCategory.parse(value)

    @field_validator("purchase_price", mode="before")
    @classmethod
    def _default_missing_price(cls, value: object) -> object:
        # Gifted or free units are stored without a price
        return 0 if value is None else value

    @field_validator("purchase_price")
    @classmethod
    def _integral_price_as_int(cls, value: int | float) -> int | float:
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value

    @field_validator("purchase_date", "warranty_expires", mode="before")
    @classmethod
    def _parse_dates(cls, value: object) -> date:
        return parse_calendar_date(value)


# === Output ===

class DeviceAnalytics(_ContractModel):
    """Valuation and warranty metrics for one device."""
    device_id: str
    device_name: str
    category: DeviceCategory
    purchase_price: int | float
    current_value: int
    depreciation_amount: int
    depreciation_percentage: float
    warranty_value: int
    warranty_status: WarrantyStatus
    days_until_expiry: int
    estimated_repair_cost: int
    protection_value: int


class CategoryBreakdown(_ContractModel):
    """Totals for all devices in one category."""
    category: DeviceCategory
    device_count: int
    total_value: int | float
    current_value: int
    depreciation_amount: int
    warranty_value: int


class WarrantyTimelineItem(_ContractModel):
    """Warranties expiring within one calendar month."""
    month: str = Field(pattern=r"^\d{4}-\d{2}$")
    expiring_count: int
    expiring_value: int
    device_names: tuple[str, ...] = ()


class DepreciationTrendItem(_ContractModel):
    """Portfolio value as measured at the first day of a past month."""
    month: str = Field(pattern=r"^\d{4}-\d{2}$")
    portfolio_value: int
    cumulative_depreciation: int


class PortfolioAnalytics(_ContractModel):
    """Aggregated analytics across a user's whole portfolio."""
    total_devices: int
    total_purchase_value: int
    total_current_value: int
    total_depreciation: int
    total_depreciation_percentage: float
    total_warranty_value: int
    total_protection_value: int
    active_warranties: int
    expiring_warranties: int
    expired_warranties: int
    average_device_age: float = Field(description="Mean device age in months")
    category_breakdown: tuple[CategoryBreakdown, ...] = ()
    warranty_timeline: tuple[WarrantyTimelineItem, ...] = ()
    depreciation_trend: tuple[DepreciationTrendItem, ...] = ()

    @classmethod
    def empty(cls, depreciation_trend: tuple[DepreciationTrendItem, ...] = ()) -> PortfolioAnalytics:
        """Zeroed analytics for a portfolio without devices."""
        return cls(
            total_devices=0,
            total_purchase_value=0,
            total_current_value=0,
            total_depreciation=0,
            total_depreciation_percentage=0.0,
            total_warranty_value=0,
            total_protection_value=0,
            active_warranties=0,
            expiring_warranties=0,
            expired_warranties=0,
            average_device_age=0.0,
            depreciation_trend=depreciation_trend,
        )
