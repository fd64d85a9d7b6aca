"""Domain entities."""

from .weather_observation import WeatherObservation
from .time_series_point import TimeSeriesPoint
from .weather_snapshot import WeatherSnapshot
from .score_result import Rating, ScoreResult
from .pressure_trend import TrendDirection, PressureTrend
from .front_passage import FrontType, BirdingImpact, FrontPassage
from .fallout_risk import FalloutLevel, FalloutRisk
from .season import Season
from .coast import CoastOrientation, CoastalClassification
from .birding_report import BirdingConditionsReport

__all__ = [
    "WeatherObservation",
    "TimeSeriesPoint",
    "WeatherSnapshot",
    "Rating",
    "ScoreResult",
    "TrendDirection",
    "PressureTrend",
    "FrontType",
    "BirdingImpact",
    "FrontPassage",
    "FalloutLevel",
    "FalloutRisk",
    "Season",
    "CoastOrientation",
    "CoastalClassification",
    "BirdingConditionsReport",
]
