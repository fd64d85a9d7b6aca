"""Concrete repository implementations."""

from .file_weather_repository import FileWeatherRepository

__all__ = [
    "FileWeatherRepository",
]
