"""Use cases - core business operations."""

from .collect_weather_data import CollectWeatherDataUseCase
from .summarize_hourly_weather import SummarizeHourlyWeatherUseCase
from .assess_birding_conditions import AssessBirdingConditionsUseCase

__all__ = [
    "CollectWeatherDataUseCase",
    "SummarizeHourlyWeatherUseCase",
    "AssessBirdingConditionsUseCase",
]
