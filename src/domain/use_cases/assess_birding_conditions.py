"""Use case for scoring every birding category for one refresh cycle."""

import logging
from ..analysis.fallout_risk import assess_fallout_risk
from ..analysis.front_passage import detect_front_passage
from ..analysis.pressure_trend import analyze_pressure_trend
from ..entities.birding_report import BirdingConditionsReport
from ..entities.coast import CoastalClassification
from ..entities.season import Season
from ..entities.weather_snapshot import WeatherSnapshot
from ..scoring.hawk_watch import score_hawk_watch
from ..scoring.owling import score_owling
from ..scoring.seabird import score_seabirding
from ..scoring.shorebird import score_shorebirds
from ..scoring.songbird import score_songbird_activity, score_songbird_migration
from ..scoring.waterfowl import score_waterfowl

logger = logging.getLogger(__name__)


class AssessBirdingConditionsUseCase:
    """
    Use case to compute all birding scores and signals from a snapshot.

    The pressure trend is computed once and handed to every consumer, so
    migration, waterfowl, fallout and front detection always agree on it.
    """

    def execute(
        self,
        snapshot: WeatherSnapshot,
        coastal: CoastalClassification,
        season: Season,
    ) -> BirdingConditionsReport:
        """
        Execute the assessment.

        Args:
            snapshot: Current observation plus pressure/temperature history
            coastal: Already-resolved coastal classification of the location
            season: Current season

        Returns:
            BirdingConditionsReport; seabird and shorebird scores are None
            inland, migration is None outside migration seasons
        """
        obs = snapshot.observation
        pressure = analyze_pressure_trend(snapshot.pressure_history)
        logger.debug(f"Pressure trend {pressure.trend.value} ({pressure.change_per_3_hours:+.2f} hPa/3h)")

        seabird = None
        shorebird = None
        if coastal.is_coastal:
            seabird = score_seabirding(
                obs.wind_direction, obs.wind_speed, obs.precipitation_6h, coastal.orientation
            )
            shorebird = score_shorebirds(
                obs.wind_direction, obs.wind_speed, obs.precipitation_6h, obs.visibility
            )

        report = BirdingConditionsReport(
            hawk_watch=score_hawk_watch(obs.wind_direction, obs.wind_speed, obs.visibility),
            seabird=seabird,
            songbird_migration=score_songbird_migration(obs.wind_direction, pressure, season),
            songbird_activity=score_songbird_activity(
                obs.temperature, obs.weather_code, obs.wind_speed, obs.hour
            ),
            shorebird=shorebird,
            waterfowl=score_waterfowl(obs.temperature, obs.wind_speed, obs.visibility, pressure),
            owling=score_owling(
                obs.wind_speed, obs.temperature, obs.weather_code, obs.humidity, obs.hour
            ),
            pressure_trend=pressure,
            front_passage=detect_front_passage(
                snapshot.pressure_history, snapshot.temperature_history, pressure
            ),
            fallout_risk=assess_fallout_risk(
                obs.visibility, obs.humidity, obs.precipitation_6h, pressure
            ),
            season=season,
            coastal=coastal,
        )

        logger.info(
            f"Assessed conditions: season={season.value}, "
            f"coastal={coastal.is_coastal}, fallout={report.fallout_risk.level.value}, "
            f"front={'yes' if report.front_passage.detected else 'no'}"
        )
        return report
