"""Waterfowl scoring."""

from typing import Union
from ..entities.pressure_trend import PressureTrend, TrendDirection
from ..entities.score_result import ScoreResult
from .common import build_result, meters_to_miles


def score_waterfowl(
    temperature: float,
    wind_speed: float,
    visibility: float,
    pressure_trend: Union[TrendDirection, PressureTrend, str],
) -> ScoreResult:
    """
    Score waterfowl movement: cold air, moderate wind, clear skies, falling pressure.

    Args:
        temperature: Temperature in Fahrenheit
        wind_speed: Wind speed in mph
        visibility: Visibility in meters
        pressure_trend: Pressure trend (enum, PressureTrend or string)

    Returns:
        ScoreResult
    """
    score = 40
    details = []

    if temperature < 35:
        score += 25
        details.append("Prime waterfowl weather")
    elif temperature < 50:
        score += 20
        details.append("Cold temps moving ducks")
    elif temperature > 60:
        score -= 10
        details.append("Too warm for waterfowl activity")

    if 10 <= wind_speed <= 20:
        score += 15
        details.append("Good flight conditions")
    elif wind_speed > 30:
        score -= 10
        details.append("Winds too strong")
    elif wind_speed < 5:
        score += 5
        details.append("Calm - birds rafting")

    visibility_miles = meters_to_miles(visibility)
    if visibility_miles > 8:
        score += 15
        details.append("Clear skies")
    elif visibility_miles < 2:
        score -= 5

    if TrendDirection.parse(pressure_trend).is_falling:
        score += 10
        details.append("Storm pushing birds")

    return build_result(score, details)
