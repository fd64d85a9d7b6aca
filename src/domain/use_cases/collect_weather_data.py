"""Use case for collecting hourly weather data."""

import logging
from typing import Optional
import pandas as pd
from ..repositories.weather_repository import WeatherRepository

logger = logging.getLogger(__name__)


class CollectWeatherDataUseCase:
    """Use case to collect hourly weather from a repository."""

    def __init__(self, repository: WeatherRepository):
        """
        Initialize use case.

        Args:
            repository: Repository for weather data access
        """
        self.repository = repository

    def execute(self, location: Optional[str] = None) -> pd.DataFrame:
        """
        Execute the use case.

        Args:
            location: Location name

        Returns:
            Hourly weather DataFrame
        """
        logger.info(f"Collecting hourly weather: location={location}")
        frame = self.repository.get_hourly_weather(location)
        logger.info(f"Collected {len(frame)} hourly records")
        return frame
