"""Pressure trend entity."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union


class TrendDirection(str, Enum):
    """Classification of a 3-hour normalized pressure change."""

    RISING_FAST = "rising-fast"
    RISING = "rising"
    STEADY = "steady"
    FALLING = "falling"
    FALLING_FAST = "falling-fast"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Union["TrendDirection", "PressureTrend", str, None]) -> "TrendDirection":
        """
        Coerce a trend-like value into a TrendDirection.

        Accepts the enum itself, a PressureTrend, or a string in either the
        hyphenated or underscored spelling ("falling-fast", "falling_fast").
        Anything unrecognised maps to UNKNOWN.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, PressureTrend):
            return value.trend
        if not value:
            return cls.UNKNOWN
        normalized = str(value).strip().lower().replace("_", "-")
        try:
            return cls(normalized)
        except ValueError:
            return cls.UNKNOWN

    @property
    def is_falling(self) -> bool:
        return self in (TrendDirection.FALLING, TrendDirection.FALLING_FAST)

    @property
    def is_rising(self) -> bool:
        return self in (TrendDirection.RISING, TrendDirection.RISING_FAST)


@dataclass(frozen=True)
class PressureTrend:
    """Represents the barometric trend over a sample window."""

    trend: TrendDirection
    change_per_3_hours: float  # hPa
    description: str
    old_value: Optional[float] = None  # hPa, oldest sample
    new_value: Optional[float] = None  # hPa, newest sample

    @classmethod
    def unknown(cls, description: str) -> "PressureTrend":
        """Sentinel for histories too short to classify."""
        return cls(trend=TrendDirection.UNKNOWN, change_per_3_hours=0.0, description=description)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "trend": self.trend.value,
            "change_per_3_hours": self.change_per_3_hours,
            "description": self.description,
            "old_value": self.old_value,
            "new_value": self.new_value,
        }

    def __str__(self) -> str:
        return self.trend.value
