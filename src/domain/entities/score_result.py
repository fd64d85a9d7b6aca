"""Score result entity and rating enumeration."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple


class Rating(str, Enum):
    """Qualitative bucket for a 0-100 score."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
    UNFAVORABLE = "Unfavorable"


@dataclass(frozen=True)
class ScoreResult:
    """Represents a bounded birding score with its rating and explanations."""

    score: int  # 0-100 inclusive
    rating: Rating
    details: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def summary(self) -> str:
        """First detail line, used as a one-line summary."""
        return self.details[0] if self.details else ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "rating": self.rating.value,
            "details": list(self.details),
        }

    def __str__(self) -> str:
        return f"{self.score} ({self.rating.value})"
