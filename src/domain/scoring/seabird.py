"""Seabird / coastal scoring."""

from typing import Dict, List, Tuple, Union
from ..entities.coast import CoastOrientation
from ..entities.score_result import ScoreResult
from .common import build_result, is_wind_in_range

# Wind arcs (from-direction) that push birds toward each coast
ONSHORE_RANGES: Dict[CoastOrientation, Tuple[int, int]] = {
    CoastOrientation.EAST: (45, 180),  # NE to S
    CoastOrientation.WEST: (225, 360),  # SW to N
    CoastOrientation.GULF: (135, 270),  # SE to W
}


def is_onshore(wind_direction: float, coast: Union[CoastOrientation, str]) -> bool:
    """Check whether the wind blows from the sea onto the given coast."""
    min_deg, max_deg = ONSHORE_RANGES[CoastOrientation.parse(coast)]
    return is_wind_in_range(wind_direction, min_deg, max_deg)


def _seabird_details(wind_speed: float, onshore: bool) -> List[str]:
    details = []

    if onshore:
        details.append("Onshore winds pushing birds closer")
    else:
        details.append("Offshore winds - birds staying out")

    if wind_speed >= 25:
        details.append("Storm-force winds excellent for pelagics")
    elif wind_speed >= 15:
        details.append("Good wind speed for seabirding")
    elif wind_speed < 10:
        details.append("Light winds - birds likely offshore")

    return details


def score_seabirding(
    wind_direction: float,
    wind_speed: float,
    precipitation: float,
    coast: Union[CoastOrientation, str] = CoastOrientation.EAST,
) -> ScoreResult:
    """
    Score seawatching conditions.

    Strong onshore winds and recent storms push pelagic species toward land.

    Args:
        wind_direction: Wind direction in degrees
        wind_speed: Wind speed in mph
        precipitation: Recent precipitation in mm
        coast: Coast orientation, defaults to east

    Returns:
        ScoreResult
    """
    score = 40
    onshore = is_onshore(wind_direction, coast)

    if onshore:
        score += 25
    else:
        score -= 10

    if wind_speed >= 25:
        score += 25
    elif wind_speed >= 20:
        score += 20
    elif wind_speed >= 15:
        score += 15
    elif wind_speed >= 10:
        score += 5
    else:
        score -= 10

    if precipitation > 5:
        score += 10
    elif precipitation > 0:
        score += 5

    return build_result(score, _seabird_details(wind_speed, onshore))
