"""Weather observation entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WeatherObservation:
    """Represents current conditions at a location, already in scoring units."""

    temperature: float  # Fahrenheit
    wind_direction: float  # degrees the wind blows from, 0-360
    wind_speed: float  # mph
    visibility: float  # meters
    humidity: float  # percentage
    precipitation_6h: float  # mm accumulated over the prior 6 hours
    weather_code: int  # WMO code
    hour: int  # local hour of day, 0-23
