"""Owling (nocturnal) scoring."""

from ..entities.score_result import ScoreResult
from .common import build_result


def score_owling(
    wind_speed: float, temperature: float, weather_code: int, humidity: float, hour: int = 21
) -> ScoreResult:
    """
    Score owling conditions. Time of day dominates; owls roost through the day.

    Args:
        wind_speed: Wind speed in mph
        temperature: Temperature in Fahrenheit
        weather_code: WMO weather code
        humidity: Relative humidity percentage
        hour: Local hour of day (0-23)

    Returns:
        ScoreResult
    """
    score = 45
    details = []

    if hour >= 20 or hour < 6:
        score += 30
        details.append("Prime owling hours")
    elif 6 <= hour < 10 or 18 <= hour < 20:
        score += 10
        details.append("Twilight - some owl activity")
    else:
        score -= 40
        details.append("Daytime - owls roosting")

    if wind_speed < 8:
        score += 20
        details.append("Calm winds - owls active")
    elif wind_speed > 15:
        score -= 20
        details.append("Too windy for owling")
    else:
        score += 5

    if 35 <= temperature <= 55:
        score += 15
        details.append("Ideal temps for owling")
    elif temperature < 25:
        score -= 10
        details.append("Very cold - reduced activity")
    elif temperature > 65:
        score -= 5

    if weather_code <= 1:
        score += 20
        details.append("Clear skies")
    elif weather_code <= 3:
        score += 10
        details.append("Partly cloudy")
    elif weather_code >= 50:
        score -= 15
        details.append("Precipitation - owls less active")

    # Dry air carries calls further
    if humidity < 70:
        score += 10
        details.append("Low humidity - good acoustics")
    elif humidity > 90:
        score -= 5
        details.append("High humidity")

    return build_result(score, details)
