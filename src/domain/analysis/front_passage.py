"""Frontal passage detection from pressure and temperature signatures."""

from typing import Optional, Sequence, Union
from ..entities.front_passage import BirdingImpact, FrontPassage, FrontType
from ..entities.pressure_trend import PressureTrend, TrendDirection
from ..entities.time_series_point import TimeSeriesPoint
from .pressure_trend import analyze_pressure_trend

# Hourly samples covering roughly the last 6 hours
TEMPERATURE_WINDOW = 7

COLD_FRONT_DROP = -5.0
WARM_FRONT_RISE = 5.0
POST_COLD_DROP = -3.0


def detect_front_passage(
    pressure_history: Sequence[TimeSeriesPoint],
    temperature_history: Sequence[TimeSeriesPoint],
    pressure_trend: Optional[Union[PressureTrend, TrendDirection, str]] = None,
) -> FrontPassage:
    """
    Detect an approaching or recently passed front.

    Rules are checked in order and the first match wins: falling pressure
    with a drop of more than 5 degrees is a cold front, falling pressure
    with a rise of more than 5 degrees is a warm front, and rapidly rising
    pressure with a drop of more than 3 degrees is post-cold-front clearing.

    Args:
        pressure_history: Pressure samples, oldest to newest
        temperature_history: Temperature samples in Fahrenheit, oldest to newest
        pressure_trend: Trend already computed for this refresh; derived from
            pressure_history when omitted

    Returns:
        FrontPassage, with detected=False when nothing matches
    """
    if pressure_trend is None:
        trend = analyze_pressure_trend(pressure_history).trend
    else:
        trend = TrendDirection.parse(pressure_trend)

    if not temperature_history or len(temperature_history) < 2:
        return FrontPassage(detected=False)

    recent = temperature_history[-TEMPERATURE_WINDOW:]
    temperature_change = recent[-1].value - recent[0].value

    if trend.is_falling and temperature_change < COLD_FRONT_DROP:
        return FrontPassage(
            detected=True,
            front_type=FrontType.COLD,
            birding_impact=BirdingImpact.POSITIVE,
            message="Cold front approaching - great conditions for hawk watching!",
            temperature_change=temperature_change,
        )

    if trend.is_falling and temperature_change > WARM_FRONT_RISE:
        return FrontPassage(
            detected=True,
            front_type=FrontType.WARM,
            birding_impact=BirdingImpact.MIXED,
            message="Warm front approaching - watch for fog and low clouds",
            temperature_change=temperature_change,
        )

    if trend is TrendDirection.RISING_FAST and temperature_change < POST_COLD_DROP:
        return FrontPassage(
            detected=True,
            front_type=FrontType.POST_COLD,
            birding_impact=BirdingImpact.POSITIVE,
            message="Cold front passed - clear skies, good visibility expected",
            temperature_change=temperature_change,
        )

    return FrontPassage(detected=False, temperature_change=temperature_change)
