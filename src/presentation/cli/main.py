"""CLI interface for birding conditions."""

import argparse
import json
import logging
import sys
from datetime import datetime

from ...application.services.birding_conditions_service import BirdingConditionsService
from ...domain.analysis.coastal import classify_coast
from ...domain.analysis.units import describe_weather_code, wind_direction_label
from ...domain.entities.birding_report import BirdingConditionsReport
from ...domain.entities.weather_snapshot import WeatherSnapshot
from ...infrastructure.repositories.file_weather_repository import FileWeatherRepository

from config.settings import LOG_FORMAT, LOG_LEVEL, SUMMARY_SETTINGS, WEATHER_DATA_FILE

logging.basicConfig(
    level=LOG_LEVEL,
    format=LOG_FORMAT,
    handlers=[logging.StreamHandler(sys.stderr)],
)
logger = logging.getLogger(__name__)

SCORE_LABELS = {
    "hawk_watch": "Hawk Watch",
    "seabird": "Seabird/Coastal",
    "songbird_migration": "Songbird Migration",
    "songbird_activity": "Songbird Activity",
    "shorebird": "Shorebirds",
    "waterfowl": "Waterfowl",
    "owling": "Owling",
}


def print_report(report: BirdingConditionsReport, snapshot: WeatherSnapshot) -> None:
    obs = snapshot.observation
    print("\n" + "=" * 60)
    print(" BIRDING CONDITIONS ")
    print("=" * 60)
    print(f" Observed:  {snapshot.observed_at:%Y-%m-%d %H:%M} | Season: {report.season.value}")
    print(
        f" Weather:   {obs.temperature:g}°F, {describe_weather_code(obs.weather_code)}, "
        f"wind {wind_direction_label(obs.wind_direction)} {obs.wind_speed:g} mph"
    )
    print(f" Pressure:  {report.pressure_trend.description} ({report.pressure_trend.change_per_3_hours:+.1f} hPa/3h)")
    print(f" Fallout:   {report.fallout_risk.level.value} - {report.fallout_risk.message}")
    if report.front_passage.detected:
        print(f" Front:     {report.front_passage.message}")
    print("-" * 60)

    for name, result in report.scores.items():
        label = SCORE_LABELS[name]
        if result is None:
            print(f" {label:<20} n/a")
            continue
        print(f" {label:<20} {result.score:>3}  {result.rating.value:<12} {result.summary}")

    print("=" * 60)


def main():
    parser = argparse.ArgumentParser(description="Birding conditions from hourly weather")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # === assess: score every category for a location ===
    assess_parser = subparsers.add_parser("assess", help="Score birding conditions for a location")
    assess_parser.add_argument("--lat", type=float, required=True, help="Latitude")
    assess_parser.add_argument("--lon", type=float, required=True, help="Longitude")
    assess_parser.add_argument("--location", type=str, default=None, help="Location name in the data file")
    assess_parser.add_argument("--at", type=datetime.fromisoformat, default=None, help="Reference time (ISO 8601)")
    assess_parser.add_argument("--json", action="store_true", help="Print the report as JSON")

    # === trend: pressure trend only ===
    trend_parser = subparsers.add_parser("trend", help="Show the pressure trend for a location")
    trend_parser.add_argument("--location", type=str, default=None, help="Location name in the data file")
    trend_parser.add_argument("--at", type=datetime.fromisoformat, default=None, help="Reference time (ISO 8601)")

    for sub in (assess_parser, trend_parser):
        sub.add_argument(
            "--data-file", type=str, default=str(WEATHER_DATA_FILE), help="Hourly weather file (.csv/.xlsx/.json)"
        )

    args = parser.parse_args()

    # === Initialize repository and service ===
    try:
        weather_repo = FileWeatherRepository(args.data_file)
        service = BirdingConditionsService(weather_repo=weather_repo, **SUMMARY_SETTINGS)
    except Exception as e:
        logger.error(f"Failed to initialize service: {e}")
        sys.exit(1)

    # === Command: assess ===
    if args.command == "assess":
        try:
            snapshot = service.load_snapshot(args.location, args.at)
            report = service.assess(snapshot, classify_coast(args.lat, args.lon))
        except Exception as e:
            logger.error(f"Assessment failed: {e}", exc_info=True)
            sys.exit(1)

        if args.json:
            print(json.dumps(report.to_dict(), indent=2))
        else:
            print_report(report, snapshot)

    # === Command: trend ===
    elif args.command == "trend":
        try:
            trend = service.pressure_trend(args.location, args.at)
        except Exception as e:
            logger.error(f"Trend analysis failed: {e}", exc_info=True)
            sys.exit(1)

        print(f"{trend.trend.value}: {trend.description} ({trend.change_per_3_hours:+.2f} hPa/3h)")


if __name__ == "__main__":
    main()
