"""Service orchestrating one birding-conditions refresh cycle."""

import logging
from datetime import datetime
from typing import Optional

import pandas as pd

from ...domain.analysis.coastal import classify_coast
from ...domain.analysis.pressure_trend import analyze_pressure_trend
from ...domain.entities.birding_report import BirdingConditionsReport
from ...domain.entities.coast import CoastalClassification
from ...domain.entities.pressure_trend import PressureTrend
from ...domain.entities.season import Season
from ...domain.entities.weather_snapshot import WeatherSnapshot
from ...domain.repositories.weather_repository import WeatherRepository

# Use cases
from ...domain.use_cases.collect_weather_data import CollectWeatherDataUseCase
from ...domain.use_cases.summarize_hourly_weather import SummarizeHourlyWeatherUseCase
from ...domain.use_cases.assess_birding_conditions import AssessBirdingConditionsUseCase

logger = logging.getLogger(__name__)


class BirdingConditionsService:
    """Collects hourly weather, summarizes it and scores every birding category."""

    def __init__(
        self,
        weather_repo: Optional[WeatherRepository] = None,
        history_hours: int = 12,
        precipitation_hours: int = 6,
    ):
        self.weather_repo = weather_repo

        self.collect_weather_uc = (
            CollectWeatherDataUseCase(weather_repo) if weather_repo is not None else None
        )
        self.summarize_uc = SummarizeHourlyWeatherUseCase(
            history_hours=history_hours, precipitation_hours=precipitation_hours
        )
        self.assess_uc = AssessBirdingConditionsUseCase()

    def assess(
        self,
        snapshot: WeatherSnapshot,
        coastal: CoastalClassification,
        season: Optional[Season] = None,
    ) -> BirdingConditionsReport:
        """Score a snapshot; season defaults to the one of the observation month."""
        season = season or Season.from_month(snapshot.observed_at.month)
        return self.assess_uc.execute(snapshot, coastal, season)

    def load_snapshot(self, location: Optional[str] = None, at: Optional[datetime] = None) -> WeatherSnapshot:
        """Collect hourly weather for a location and reduce it to a snapshot."""
        if self.collect_weather_uc is None:
            raise RuntimeError("No weather repository configured for this service")

        hourly: pd.DataFrame = self.collect_weather_uc.execute(location)
        return self.summarize_uc.execute(hourly, now=at)

    def assess_location(
        self,
        latitude: float,
        longitude: float,
        location: Optional[str] = None,
        at: Optional[datetime] = None,
    ) -> BirdingConditionsReport:
        """Run the full refresh cycle for a location."""
        logger.info(f"=== Assessing birding conditions for {location or 'default'} ({latitude}, {longitude}) ===")

        snapshot = self.load_snapshot(location, at)
        coastal = classify_coast(latitude, longitude)
        logger.info(
            f"Location is {'coastal (' + coastal.orientation.value + ')' if coastal.is_coastal else 'inland'}"
        )
        return self.assess(snapshot, coastal)

    def pressure_trend(self, location: Optional[str] = None, at: Optional[datetime] = None) -> PressureTrend:
        """Pressure trend for a location without scoring anything else."""
        snapshot = self.load_snapshot(location, at)
        return analyze_pressure_trend(snapshot.pressure_history)
