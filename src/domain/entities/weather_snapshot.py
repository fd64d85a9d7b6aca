"""Weather snapshot entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Tuple
from .time_series_point import TimeSeriesPoint
from .weather_observation import WeatherObservation


@dataclass(frozen=True)
class WeatherSnapshot:
    """Everything one refresh cycle needs: current conditions plus recent history."""

    observation: WeatherObservation
    observed_at: datetime
    pressure_history: Tuple[TimeSeriesPoint, ...] = field(default_factory=tuple)  # hPa
    temperature_history: Tuple[TimeSeriesPoint, ...] = field(default_factory=tuple)  # Fahrenheit
