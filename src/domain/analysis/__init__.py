"""Derived weather signals consumed by the scorers."""

from .pressure_trend import analyze_pressure_trend, classify_pressure_change
from .front_passage import detect_front_passage
from .fallout_risk import assess_fallout_risk
from .coastal import classify_coast
from .units import (
    celsius_to_fahrenheit,
    kmh_to_mph,
    wind_direction_label,
    describe_weather_code,
    round_half_up,
    to_naive_utc,
)

__all__ = [
    "analyze_pressure_trend",
    "classify_pressure_change",
    "detect_front_passage",
    "assess_fallout_risk",
    "classify_coast",
    "celsius_to_fahrenheit",
    "kmh_to_mph",
    "wind_direction_label",
    "describe_weather_code",
    "round_half_up",
    "to_naive_utc",
]
