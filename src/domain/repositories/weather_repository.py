"""Weather repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
import pandas as pd


class WeatherRepository(ABC):
    """Abstract repository for hourly weather data access."""

    @abstractmethod
    def get_hourly_weather(self, location: Optional[str] = None) -> pd.DataFrame:
        """
        Retrieve hourly weather for a location.

        Args:
            location: Location name (optional; sources holding a single
                location ignore it)

        Returns:
            DataFrame with one row per hour, using Open-Meteo column names
            (time, temperature_2m, relative_humidity_2m, precipitation,
            weather_code, surface_pressure, visibility, wind_speed_10m,
            wind_direction_10m)
        """
        pass

    @abstractmethod
    def save_hourly_weather(self, frame: pd.DataFrame, location: Optional[str] = None) -> None:
        """
        Save hourly weather.

        Args:
            frame: Hourly weather DataFrame
            location: Location name to tag the rows with (optional)
        """
        pass
