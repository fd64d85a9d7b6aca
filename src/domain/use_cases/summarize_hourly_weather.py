"""Use case for reducing an hourly forecast to the inputs of one refresh cycle."""

import logging
from datetime import datetime
from typing import List, Optional, Tuple
import pandas as pd
from ..analysis.units import celsius_to_fahrenheit, kmh_to_mph, round_half_up, to_naive_utc
from ..entities.time_series_point import TimeSeriesPoint
from ..entities.weather_observation import WeatherObservation
from ..entities.weather_snapshot import WeatherSnapshot

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = [
    "time",
    "temperature_2m",
    "relative_humidity_2m",
    "precipitation",
    "weather_code",
    "surface_pressure",
    "visibility",
    "wind_speed_10m",
    "wind_direction_10m",
]


class SummarizeHourlyWeatherUseCase:
    """Use case to build a WeatherSnapshot from hourly Open-Meteo style data."""

    def __init__(self, history_hours: int = 12, precipitation_hours: int = 6):
        """
        Initialize use case.

        Args:
            history_hours: Number of hourly samples kept for pressure and
                temperature histories
            precipitation_hours: Window for accumulated precipitation
        """
        self.history_hours = history_hours
        self.precipitation_hours = precipitation_hours

    def _validate(self, hourly: pd.DataFrame) -> pd.DataFrame:
        if hourly is None or hourly.empty:
            raise ValueError("No hourly weather data to summarize")

        missing = [col for col in REQUIRED_COLUMNS if col not in hourly.columns]
        if missing:
            raise ValueError(f"Hourly weather is missing columns: {missing}")

        df = hourly.copy()
        # Offset-bearing times become naive UTC; naive times are kept as-is
        df["time"] = pd.to_datetime(df["time"], utc=True).dt.tz_localize(None)
        return df.sort_values("time").reset_index(drop=True)

    def _current_index(self, times: pd.Series, now: datetime) -> int:
        """Index of the first hour at or after now (floored to the hour), else the last row."""
        current_hour = pd.Timestamp(now).floor("h")
        later = times[times >= current_hour]
        if later.empty:
            return len(times) - 1
        return int(later.index[0])

    def _history(self, past: pd.DataFrame, column: str, fahrenheit: bool = False) -> Tuple[TimeSeriesPoint, ...]:
        points: List[TimeSeriesPoint] = []
        for time, value in zip(past["time"], past[column]):
            if pd.isna(value):
                continue
            value = float(value)
            if fahrenheit:
                value = celsius_to_fahrenheit(value)
            points.append(TimeSeriesPoint(timestamp=time.to_pydatetime(), value=value))
        return tuple(points)

    def execute(self, hourly: pd.DataFrame, now: Optional[datetime] = None) -> WeatherSnapshot:
        """
        Execute summarization.

        Args:
            hourly: Hourly weather with Open-Meteo column names (temperature
                in Celsius, wind speed in km/h, visibility in meters)
            now: Reference time, defaults to the current local time; aware
                values are compared in UTC

        Returns:
            WeatherSnapshot with the current observation and recent histories
        """
        df = self._validate(hourly)
        now = to_naive_utc(now) if now is not None else datetime.now()

        index = self._current_index(df["time"], now)
        current = df.iloc[index]
        past = df.iloc[: index + 1]

        precipitation_6h = float(
            past["precipitation"].tail(self.precipitation_hours).fillna(0).sum()
        )

        observation = WeatherObservation(
            temperature=round_half_up(celsius_to_fahrenheit(float(current["temperature_2m"]))),
            wind_direction=float(current["wind_direction_10m"]),
            wind_speed=round_half_up(kmh_to_mph(float(current["wind_speed_10m"]))),
            visibility=float(current["visibility"]),
            humidity=float(current["relative_humidity_2m"]),
            precipitation_6h=precipitation_6h,
            weather_code=int(current["weather_code"]),
            hour=int(current["time"].hour),
        )

        recent = past.tail(self.history_hours)
        snapshot = WeatherSnapshot(
            observation=observation,
            observed_at=current["time"].to_pydatetime(),
            pressure_history=self._history(recent, "surface_pressure"),
            temperature_history=self._history(recent, "temperature_2m", fahrenheit=True),
        )

        logger.info(
            f"Summarized hour {snapshot.observed_at.isoformat()} "
            f"({len(snapshot.pressure_history)} pressure samples, "
            f"{precipitation_6h:.1f} mm in last {self.precipitation_hours}h)"
        )
        return snapshot
