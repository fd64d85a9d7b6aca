"""Barometric pressure trend analysis."""

from typing import Sequence
from ..entities.pressure_trend import PressureTrend, TrendDirection
from ..entities.time_series_point import TimeSeriesPoint

SECONDS_PER_HOUR = 3600.0

RISING_FAST_THRESHOLD = 2.0
RISING_THRESHOLD = 0.5
FALLING_THRESHOLD = -0.5
FALLING_FAST_THRESHOLD = -2.0

DESCRIPTIONS = {
    TrendDirection.RISING_FAST: "Rising rapidly",
    TrendDirection.RISING: "Rising",
    TrendDirection.STEADY: "Steady",
    TrendDirection.FALLING: "Falling",
    TrendDirection.FALLING_FAST: "Falling rapidly",
}


def classify_pressure_change(change_per_3_hours: float) -> TrendDirection:
    """Classify a 3-hour normalized pressure change in hPa."""
    if change_per_3_hours >= RISING_FAST_THRESHOLD:
        return TrendDirection.RISING_FAST
    if change_per_3_hours >= RISING_THRESHOLD:
        return TrendDirection.RISING
    if change_per_3_hours <= FALLING_FAST_THRESHOLD:
        return TrendDirection.FALLING_FAST
    if change_per_3_hours <= FALLING_THRESHOLD:
        return TrendDirection.FALLING
    return TrendDirection.STEADY


def analyze_pressure_trend(history: Sequence[TimeSeriesPoint]) -> PressureTrend:
    """
    Analyze the pressure trend from an oldest-to-newest history.

    The change between the first and last samples is rescaled to a per-3-hour
    rate, the standard unit for synoptic trend reporting.

    Args:
        history: Pressure samples in hPa, ordered oldest to newest

    Returns:
        PressureTrend; trend is UNKNOWN with fewer than two samples or a
        span under one hour
    """
    if not history or len(history) < 2:
        return PressureTrend.unknown("Insufficient data")

    oldest = history[0]
    newest = history[-1]

    hours = (newest.timestamp - oldest.timestamp).total_seconds() / SECONDS_PER_HOUR
    if hours < 1:
        return PressureTrend.unknown("Insufficient time span")

    change_per_3_hours = (newest.value - oldest.value) / hours * 3
    trend = classify_pressure_change(change_per_3_hours)

    return PressureTrend(
        trend=trend,
        change_per_3_hours=change_per_3_hours,
        description=DESCRIPTIONS[trend],
        old_value=oldest.value,
        new_value=newest.value,
    )
