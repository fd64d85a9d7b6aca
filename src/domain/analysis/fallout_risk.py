"""Fallout risk assessment."""

from typing import Union
from ..entities.fallout_risk import FalloutLevel, FalloutRisk
from ..entities.pressure_trend import PressureTrend, TrendDirection

HIGH_RISK_SCORE = 7
MODERATE_RISK_SCORE = 4

MESSAGES = {
    FalloutLevel.HIGH: "Strong fallout potential - check local hotspots!",
    FalloutLevel.MODERATE: "Moderate fallout conditions - migrants may be grounded",
    FalloutLevel.LOW: "Normal conditions - migrants likely moving through",
}


def _visibility_points(visibility: float) -> int:
    if visibility < 2000:
        return 4
    if visibility < 5000:
        return 3
    if visibility < 8000:
        return 1
    return 0


def _humidity_points(humidity: float) -> int:
    # Saturated air usually means fog or low cloud
    if humidity > 90:
        return 3
    if humidity > 85:
        return 2
    if humidity > 75:
        return 1
    return 0


def _precipitation_points(precipitation_6h: float) -> int:
    if precipitation_6h > 5:
        return 3
    if precipitation_6h > 0:
        return 2
    return 0


def _pressure_points(trend: TrendDirection) -> int:
    if trend is TrendDirection.FALLING_FAST:
        return 2
    if trend is TrendDirection.FALLING:
        return 1
    return 0


def assess_fallout_risk(
    visibility: float,
    humidity: float,
    precipitation_6h: float,
    pressure_trend: Union[TrendDirection, PressureTrend, str],
) -> FalloutRisk:
    """
    Assess the chance that weather forces migrants down en masse.

    Args:
        visibility: Visibility in meters
        humidity: Relative humidity percentage
        precipitation_6h: Precipitation over the last 6 hours in mm
        pressure_trend: Pressure trend (enum, PressureTrend or string)

    Returns:
        FalloutRisk with a categorical level and fixed advisory message
    """
    risk_score = (
        _visibility_points(visibility)
        + _humidity_points(humidity)
        + _precipitation_points(precipitation_6h)
        + _pressure_points(TrendDirection.parse(pressure_trend))
    )

    if risk_score >= HIGH_RISK_SCORE:
        level = FalloutLevel.HIGH
    elif risk_score >= MODERATE_RISK_SCORE:
        level = FalloutLevel.MODERATE
    else:
        level = FalloutLevel.LOW

    return FalloutRisk(level=level, message=MESSAGES[level], risk_score=risk_score)
