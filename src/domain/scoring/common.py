"""Helpers shared by every birding scorer."""

from typing import Iterable, Tuple
from ..entities.score_result import Rating, ScoreResult

METERS_PER_MILE = 1609.34

# Lower bound for each rating, checked top-down
RATING_THRESHOLDS: Tuple[Tuple[int, Rating], ...] = (
    (80, Rating.EXCELLENT),
    (65, Rating.GOOD),
    (50, Rating.FAIR),
    (35, Rating.POOR),
)


def is_wind_in_range(direction: float, min_deg: float, max_deg: float) -> bool:
    """
    Check whether a wind direction lies on the clockwise arc min_deg -> max_deg.

    Both ends are inclusive. When min_deg > max_deg the arc wraps through
    north, e.g. (350, 10) contains 355 and 5 but not 180.
    """
    if min_deg <= max_deg:
        return min_deg <= direction <= max_deg
    return direction >= min_deg or direction <= max_deg


def rating_for(score: float) -> Rating:
    """Map a 0-100 score to its rating bucket."""
    for threshold, rating in RATING_THRESHOLDS:
        if score >= threshold:
            return rating
    return Rating.UNFAVORABLE


def clamp_score(score: float) -> int:
    return int(max(0, min(100, score)))


def meters_to_miles(meters: float) -> float:
    return meters / METERS_PER_MILE


def build_result(score: float, details: Iterable[str]) -> ScoreResult:
    """Clamp an accumulated score and attach the rating derived from it."""
    clamped = clamp_score(score)
    return ScoreResult(score=clamped, rating=rating_for(clamped), details=tuple(details))
