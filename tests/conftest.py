"""Shared fixtures."""

from datetime import datetime, timedelta

import pandas as pd
import pytest

from src.domain.entities.time_series_point import TimeSeriesPoint


def make_series(values, end=datetime(2024, 5, 1, 12, 0), step_hours=1):
    """Hourly TimeSeriesPoints ending at `end`, oldest first."""
    start = end - timedelta(hours=step_hours * (len(values) - 1))
    return [
        TimeSeriesPoint(timestamp=start + timedelta(hours=step_hours * i), value=v)
        for i, v in enumerate(values)
    ]


@pytest.fixture
def hourly_frame():
    """24 hours of Open-Meteo style data for 2024-05-01."""
    times = pd.date_range("2024-05-01 00:00", periods=24, freq="h")
    precipitation = [0.0] * 24
    precipitation[3] = 5.0
    for hour in range(9, 15):
        precipitation[hour] = 1.0
    temperature = [10.0] * 24
    temperature[14] = 15.0

    return pd.DataFrame(
        {
            "time": times,
            "temperature_2m": temperature,
            "relative_humidity_2m": [70.0] * 24,
            "precipitation": precipitation,
            "weather_code": [1] * 24,
            "surface_pressure": [1000.0 + 0.5 * i for i in range(24)],
            "visibility": [20000.0] * 24,
            "wind_speed_10m": [16.09] * 24,
            "wind_direction_10m": [315.0] * 24,
        }
    )


@pytest.fixture
def series():
    """Factory for hourly TimeSeriesPoint histories."""
    return make_series
