"""Frontal passage entity."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class FrontType(str, Enum):
    """Kind of frontal passage."""

    COLD = "cold"
    WARM = "warm"
    POST_COLD = "post-cold"


class BirdingImpact(str, Enum):
    """Expected effect of a front on birding."""

    POSITIVE = "positive"
    MIXED = "mixed"


@dataclass(frozen=True)
class FrontPassage:
    """Represents the outcome of front detection."""

    detected: bool
    front_type: Optional[FrontType] = None
    birding_impact: Optional[BirdingImpact] = None
    message: Optional[str] = None
    temperature_change: float = 0.0  # over the last ~6 hours

    def to_dict(self) -> Dict[str, Any]:
        return {
            "detected": self.detected,
            "type": self.front_type.value if self.front_type else None,
            "birding_impact": self.birding_impact.value if self.birding_impact else None,
            "message": self.message,
            "temperature_change": self.temperature_change,
        }
