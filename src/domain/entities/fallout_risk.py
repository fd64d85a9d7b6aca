"""Fallout risk entity."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class FalloutLevel(str, Enum):
    """Categorical fallout risk."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


@dataclass(frozen=True)
class FalloutRisk:
    """Represents the chance of migrants being grounded by weather."""

    level: FalloutLevel
    message: str
    risk_score: int = 0  # unbounded accumulation, not a 0-100 score

    def to_dict(self) -> Dict[str, Any]:
        return {"level": self.level.value, "message": self.message, "risk_score": self.risk_score}

    def __str__(self) -> str:
        return self.level.value
