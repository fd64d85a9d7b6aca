"""Songbird migration and activity scoring."""

from typing import Optional, Union
from ..entities.pressure_trend import PressureTrend, TrendDirection
from ..entities.score_result import ScoreResult
from ..entities.season import Season
from .common import build_result, is_wind_in_range

TrendLike = Union[TrendDirection, PressureTrend, str]

# Tailwinds for migrants: S/SW in spring, NW/N in fall
MIGRATION_WIND_RANGES = {
    Season.SPRING: (135, 270),
    Season.FALL: (270, 45),
}


def score_songbird_migration(
    wind_direction: float,
    pressure_trend: TrendLike,
    season: Union[Season, str],
) -> Optional[ScoreResult]:
    """
    Score how likely migrants are to be arriving or present.

    Args:
        wind_direction: Wind direction in degrees
        pressure_trend: Pressure trend (enum, PressureTrend or string)
        season: Current season

    Returns:
        ScoreResult, or None outside spring and fall migration (including
        season names other than spring, fall and winter)
    """
    try:
        season = Season.parse(season)
    except ValueError:
        return None
    if not season.is_migration:
        return None

    score = 40
    details = []

    min_deg, max_deg = MIGRATION_WIND_RANGES[season]
    if is_wind_in_range(wind_direction, min_deg, max_deg):
        score += 20
        details.append("Favorable winds for migration")
    else:
        score -= 5
        details.append("Headwinds slowing migration")

    trend = TrendDirection.parse(pressure_trend)
    if trend is TrendDirection.RISING_FAST:
        score += 20
        details.append("Post-front - migrants concentrated")
    elif trend is TrendDirection.RISING:
        score += 15
        details.append("Rising pressure - birds moving")
    elif trend is TrendDirection.FALLING:
        score += 5
        details.append("Pre-front conditions")
    elif trend is TrendDirection.FALLING_FAST:
        score -= 5
        details.append("Storm approaching - birds grounded")
    else:
        score += 10
        details.append("Steady conditions")

    return build_result(score, details)


def score_songbird_activity(
    temperature: float, weather_code: int, wind_speed: float, hour: int = 7
) -> ScoreResult:
    """
    Score year-round songbird visibility and activity.

    Args:
        temperature: Temperature in Fahrenheit
        weather_code: WMO weather code
        wind_speed: Wind speed in mph
        hour: Local hour of day (0-23)

    Returns:
        ScoreResult with one detail per contributing factor
    """
    score = 40
    details = []

    if 5 <= hour < 9:
        score += 15
        details.append("Dawn chorus - peak activity")
    elif 17 <= hour < 20:
        score += 10
        details.append("Evening activity")
    elif 12 <= hour < 15:
        score -= 10
        details.append("Midday lull")

    if weather_code <= 2:
        score += 25
        details.append("Clear skies - birds active")
    elif weather_code == 3:
        score += 20
        details.append("Overcast - extended activity")
    elif 45 <= weather_code < 50:
        score += 10
        details.append("Foggy - check sheltered areas")
    elif 50 <= weather_code < 80:
        score -= 5
        details.append("Light precip - reduced activity")
    elif weather_code >= 80:
        score -= 15
        details.append("Heavy precip - birds sheltering")

    if 50 <= temperature <= 75:
        score += 15
        details.append("Ideal temps for activity")
    elif 40 <= temperature < 50:
        score += 10
        details.append("Cool - morning activity best")
    elif temperature < 40:
        score += 5
        details.append("Cold - check feeders")
    elif temperature > 85:
        score -= 10
        details.append("Hot - early morning only")
    elif temperature > 75:
        score += 5
        details.append("Warm - avoid midday")

    if wind_speed < 8:
        score += 15
        details.append("Calm winds - easy spotting")
    elif wind_speed < 15:
        score += 10
        details.append("Light winds - good conditions")
    elif wind_speed > 25:
        score -= 15
        details.append("Very windy - birds hunkered down")
    elif wind_speed > 18:
        score -= 5
        details.append("Breezy - check sheltered spots")

    return build_result(score, details)
