"""Example usage of the birding conditions system."""

import logging
from datetime import datetime, timedelta

from src.application.services.birding_conditions_service import BirdingConditionsService
from src.domain.entities.coast import CoastalClassification
from src.domain.entities.time_series_point import TimeSeriesPoint
from src.domain.entities.weather_observation import WeatherObservation
from src.domain.entities.weather_snapshot import WeatherSnapshot
from src.infrastructure.repositories.file_weather_repository import FileWeatherRepository
from config.settings import LOG_FORMAT, SUMMARY_SETTINGS, WEATHER_DATA_FILE

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


def print_report(report):
    for name, result in report.scores.items():
        print(f"  {name:<20} {result if result is not None else 'n/a'}")
    print(f"  Pressure: {report.pressure_trend.description}")
    print(f"  Fallout:  {report.fallout_risk.message}")
    if report.front_passage.detected:
        print(f"  Front:    {report.front_passage.message}")


def main():
    """Example usage."""
    service = BirdingConditionsService(**SUMMARY_SETTINGS)

    # Example 1: Score a hand-built snapshot (post-cold-front morning on a ridge)
    print("=" * 60)
    print("Example 1: Scoring a single observation")
    print("=" * 60)
    now = datetime(2024, 9, 18, 8, 0)
    snapshot = WeatherSnapshot(
        observation=WeatherObservation(
            temperature=52,
            wind_direction=310,
            wind_speed=16,
            visibility=24000,
            humidity=55,
            precipitation_6h=0.0,
            weather_code=1,
            hour=8,
        ),
        observed_at=now,
        pressure_history=tuple(
            TimeSeriesPoint(timestamp=now - timedelta(hours=6 - i), value=1006.0 + 1.5 * i)
            for i in range(7)
        ),
        temperature_history=tuple(
            TimeSeriesPoint(timestamp=now - timedelta(hours=6 - i), value=60.0 - i)
            for i in range(7)
        ),
    )
    report = service.assess(snapshot, CoastalClassification.inland())
    print_report(report)

    # Example 2: Score from an hourly weather export
    print("\n" + "=" * 60)
    print("Example 2: Scoring from an hourly weather file")
    print("=" * 60)
    try:
        file_service = BirdingConditionsService(
            weather_repo=FileWeatherRepository(str(WEATHER_DATA_FILE)), **SUMMARY_SETTINGS
        )
        report = file_service.assess_location(38.93, -74.91)
        print_report(report)
    except Exception as e:
        logger.error(f"Assessment failed: {e}", exc_info=True)


if __name__ == "__main__":
    main()
