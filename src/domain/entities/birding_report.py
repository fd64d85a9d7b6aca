"""Birding conditions report entity."""

from dataclasses import dataclass
from typing import Any, Dict, Optional
from .coast import CoastalClassification
from .fallout_risk import FalloutRisk
from .front_passage import FrontPassage
from .pressure_trend import PressureTrend
from .score_result import ScoreResult
from .season import Season


def _score_or_none(result: Optional[ScoreResult]) -> Optional[Dict[str, Any]]:
    return result.to_dict() if result is not None else None


@dataclass(frozen=True)
class BirdingConditionsReport:
    """
    Scores and derived signals for one location and one refresh cycle.

    A score of None means the category does not apply (out of season or an
    inland location), which is distinct from a score of zero.
    """

    hawk_watch: ScoreResult
    songbird_activity: ScoreResult
    waterfowl: ScoreResult
    owling: ScoreResult
    pressure_trend: PressureTrend
    front_passage: FrontPassage
    fallout_risk: FalloutRisk
    season: Season
    coastal: CoastalClassification
    songbird_migration: Optional[ScoreResult] = None
    seabird: Optional[ScoreResult] = None
    shorebird: Optional[ScoreResult] = None

    @property
    def scores(self) -> Dict[str, Optional[ScoreResult]]:
        """All category scores keyed by name, in display order."""
        return {
            "hawk_watch": self.hawk_watch,
            "seabird": self.seabird,
            "songbird_migration": self.songbird_migration,
            "songbird_activity": self.songbird_activity,
            "shorebird": self.shorebird,
            "waterfowl": self.waterfowl,
            "owling": self.owling,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "season": self.season.value,
            "coastal": self.coastal.to_dict(),
            "scores": {name: _score_or_none(result) for name, result in self.scores.items()},
            "pressure_trend": self.pressure_trend.to_dict(),
            "front_passage": self.front_passage.to_dict(),
            "fallout_risk": self.fallout_risk.to_dict(),
        }
