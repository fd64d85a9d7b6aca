"""Hawk watch scoring.

Ideal conditions for ridge hawk watches are NW winds of 10-25 mph with clear
visibility.
"""

from typing import List
from ..entities.score_result import ScoreResult
from .common import build_result, is_wind_in_range, meters_to_miles


def _is_ideal_direction(wind_direction: float) -> bool:
    # WNW through NE
    return is_wind_in_range(wind_direction, 290, 360) or is_wind_in_range(wind_direction, 0, 45)


def _is_favorable_direction(wind_direction: float) -> bool:
    return is_wind_in_range(wind_direction, 250, 70)


def _hawk_watch_details(
    wind_direction: float, wind_speed: float, visibility_miles: float
) -> List[str]:
    details = []

    if _is_ideal_direction(wind_direction):
        details.append("Ideal NW-NE wind direction")
    elif _is_favorable_direction(wind_direction):
        details.append("Favorable wind direction")
    else:
        details.append("Wind direction not optimal")

    if 10 <= wind_speed <= 25:
        details.append(f"Good wind speed ({wind_speed:g} mph)")
    elif wind_speed > 35:
        details.append("Winds may be too strong")
    elif wind_speed < 5:
        details.append("Winds too light for good lift")

    if visibility_miles > 10:
        details.append("Excellent visibility")
    elif visibility_miles < 2:
        details.append("Poor visibility")

    return details


def score_hawk_watch(wind_direction: float, wind_speed: float, visibility: float) -> ScoreResult:
    """
    Score hawk watch conditions.

    Args:
        wind_direction: Wind direction in degrees (0-360)
        wind_speed: Wind speed in mph
        visibility: Visibility in meters

    Returns:
        ScoreResult with direction, speed and visibility details
    """
    score = 50

    if _is_ideal_direction(wind_direction):
        score += 20
    elif _is_favorable_direction(wind_direction):
        score += 10
    else:
        score -= 15  # SE-SW winds

    if 10 <= wind_speed <= 25:
        score += 20
    elif 5 <= wind_speed < 10:
        score += 10
    elif 25 < wind_speed <= 35:
        score += 5
    elif wind_speed > 35:
        score -= 20  # birds may not fly
    else:
        score -= 10  # too little lift

    visibility_miles = meters_to_miles(visibility)
    if visibility_miles > 10:
        score += 10
    elif visibility_miles >= 5:
        score += 5
    elif visibility_miles < 2:
        score -= 20

    return build_result(score, _hawk_watch_details(wind_direction, wind_speed, visibility_miles))
