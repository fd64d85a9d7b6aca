"""Shorebird scoring."""

from ..entities.score_result import ScoreResult
from .common import build_result, is_wind_in_range, meters_to_miles


def score_shorebirds(
    wind_direction: float, wind_speed: float, precipitation_6h: float, visibility: float
) -> ScoreResult:
    """
    Score shorebird conditions: onshore winds, recent rain, good visibility, calm air.

    Args:
        wind_direction: Wind direction in degrees
        wind_speed: Wind speed in mph
        precipitation_6h: Precipitation over the last 6 hours in mm
        visibility: Visibility in meters

    Returns:
        ScoreResult
    """
    score = 40
    details = []

    if is_wind_in_range(wind_direction, 45, 180):
        score += 25
        details.append("Onshore winds")
    else:
        score -= 5
        details.append("Offshore winds")

    if precipitation_6h > 2:
        score += 15
        details.append("Recent rain - exposed mudflats")
    elif precipitation_6h > 0:
        score += 10
        details.append("Light recent rain")

    visibility_miles = meters_to_miles(visibility)
    if visibility_miles > 8:
        score += 15
        details.append("Good visibility")
    elif visibility_miles < 2:
        score -= 10
        details.append("Poor visibility")

    if wind_speed < 15:
        score += 10
        details.append("Calm conditions for feeding")
    elif wind_speed > 25:
        score -= 10
        details.append("Too windy")

    return build_result(score, details)
