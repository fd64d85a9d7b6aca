"""Unit conversions and display labels for raw weather values."""

import math
from datetime import datetime, timezone

KMH_TO_MPH = 0.621371

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)

WEATHER_CODES = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    71: "Slight snow",
    73: "Moderate snow",
    75: "Heavy snow",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def kmh_to_mph(kmh: float) -> float:
    return kmh * KMH_TO_MPH


def wind_direction_label(degrees: float) -> str:
    """16-point compass label for a direction in degrees, e.g. 315 -> 'NW'."""
    normalized = degrees % 360
    index = int((normalized + 11.25) // 22.5) % 16
    return COMPASS_POINTS[index]


def describe_weather_code(code: int) -> str:
    return WEATHER_CODES.get(code, "Unknown")


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up, e.g. 36.5 -> 37."""
    return int(math.floor(value + 0.5))


def to_naive_utc(value: datetime) -> datetime:
    """Drop the offset of an aware datetime after converting it to UTC; naive values pass through."""
    if value.tzinfo is None or value.utcoffset() is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
