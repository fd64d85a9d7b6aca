"""Tests for the birding scorers."""

import itertools

import pytest
from src.domain.entities.pressure_trend import PressureTrend, TrendDirection
from src.domain.entities.score_result import Rating
from src.domain.entities.season import Season
from src.domain.scoring import (
    clamp_score,
    is_wind_in_range,
    rating_for,
    score_hawk_watch,
    score_owling,
    score_seabirding,
    score_shorebirds,
    score_songbird_activity,
    score_songbird_migration,
    score_waterfowl,
)
from src.domain.scoring.seabird import is_onshore


@pytest.mark.parametrize("direction", [350, 355, 0, 5, 10])
def test_wind_range_wraps_through_north(direction):
    """Test wrap-around arcs include both sides of north."""
    assert is_wind_in_range(direction, 350, 10)


@pytest.mark.parametrize("direction", [11, 180, 349])
def test_wind_range_wrap_excludes_outside(direction):
    """Test wrap-around arcs exclude directions outside the arc."""
    assert not is_wind_in_range(direction, 350, 10)


def test_wind_range_simple():
    """Test non-wrapping arcs are inclusive at both ends."""
    assert is_wind_in_range(45, 45, 180)
    assert is_wind_in_range(180, 45, 180)
    assert not is_wind_in_range(181, 45, 180)
    assert not is_wind_in_range(44.9, 45, 180)


@pytest.mark.parametrize(
    "score,expected",
    [
        (100, Rating.EXCELLENT),
        (80, Rating.EXCELLENT),
        (79, Rating.GOOD),
        (65, Rating.GOOD),
        (64, Rating.FAIR),
        (50, Rating.FAIR),
        (49, Rating.POOR),
        (35, Rating.POOR),
        (34, Rating.UNFAVORABLE),
        (0, Rating.UNFAVORABLE),
    ],
)
def test_rating_for(score, expected):
    """Test rating thresholds."""
    assert rating_for(score) is expected


def test_clamp_score():
    """Test clamping into [0, 100]."""
    assert clamp_score(-40) == 0
    assert clamp_score(140) == 100
    assert clamp_score(55) == 55
    assert isinstance(clamp_score(55.0), int)


# --- Hawk watch ---


def test_hawk_watch_prefers_nw_winds_and_visibility():
    """Test ideal hawk watch conditions."""
    result = score_hawk_watch(315, 15, 16093)
    assert result.score >= 80
    assert result.rating in (Rating.EXCELLENT, Rating.GOOD)
    assert result.score == 95
    assert result.details == ("Ideal NW-NE wind direction", "Good wind speed (15 mph)")


def test_hawk_watch_poor_conditions():
    """Test southerly calm fog."""
    result = score_hawk_watch(180, 2, 1000)
    assert result.score == 5
    assert result.rating is Rating.UNFAVORABLE
    assert result.details == (
        "Wind direction not optimal",
        "Winds too light for good lift",
        "Poor visibility",
    )


def test_hawk_watch_favorable_arc():
    """Test the broader favorable arc and strong winds."""
    result = score_hawk_watch(260, 30, 20000)
    assert result.score == 75
    assert result.details == ("Favorable wind direction", "Excellent visibility")


def test_hawk_watch_gale():
    """Test too-strong winds."""
    result = score_hawk_watch(0, 40, 9000)
    assert result.score == 55
    assert "Winds may be too strong" in result.details


# --- Seabirds ---


def test_seabird_storm_onshore_east():
    """Test storm-driven onshore winds on the east coast."""
    result = score_seabirding(90, 25, 6, "east")
    assert result.score == 100
    assert result.details == (
        "Onshore winds pushing birds closer",
        "Storm-force winds excellent for pelagics",
    )


def test_seabird_offshore_west():
    """Test offshore light winds on the west coast."""
    result = score_seabirding(90, 5, 0, "west")
    assert result.score == 20
    assert result.details == (
        "Offshore winds - birds staying out",
        "Light winds - birds likely offshore",
    )


def test_seabird_gulf_moderate():
    """Test a moderate gulf coast day with no speed message."""
    result = score_seabirding(200, 12, 1, "gulf")
    assert result.score == 75
    assert result.details == ("Onshore winds pushing birds closer",)


def test_seabird_default_coast_is_east():
    """Test the default coast orientation."""
    assert score_seabirding(90, 15, 0) == score_seabirding(90, 15, 0, "east")


def test_is_onshore_per_coast():
    """Test each coast's onshore arc."""
    assert is_onshore(100, "east")
    assert not is_onshore(300, "east")
    assert is_onshore(300, "west")
    assert is_onshore(360, "west")
    assert not is_onshore(10, "west")
    assert is_onshore(200, "gulf")
    assert not is_onshore(90, "gulf")


# --- Songbirds ---


@pytest.mark.parametrize("trend", ["rising-fast", "falling", "steady", TrendDirection.RISING])
def test_migration_not_in_winter(trend):
    """Test migration scoring is not applicable in winter."""
    assert score_songbird_migration(200, trend, "winter") is None
    assert score_songbird_migration(200, trend, Season.WINTER) is None


@pytest.mark.parametrize("season", ["summer", "monsoon", ""])
def test_migration_unknown_season_not_applicable(season):
    """Test season names outside the enum are treated as no migration."""
    assert score_songbird_migration(200, "rising", season) is None


def test_migration_spring_post_front():
    """Test spring tailwinds after a front."""
    result = score_songbird_migration(200, "rising-fast", Season.SPRING)
    assert result.score == 80
    assert result.details == ("Favorable winds for migration", "Post-front - migrants concentrated")


def test_migration_accepts_underscore_trend():
    """Test the underscore spelling of falling-fast is honored."""
    result = score_songbird_migration(200, "falling_fast", "fall")
    assert result.score == 30
    assert result.details == ("Headwinds slowing migration", "Storm approaching - birds grounded")


def test_migration_fall_wraps_north():
    """Test fall tailwinds wrap through north."""
    result = score_songbird_migration(0, TrendDirection.STEADY, "fall")
    assert result.score == 70
    assert result.details[1] == "Steady conditions"


def test_migration_accepts_pressure_trend():
    """Test a PressureTrend can be passed directly."""
    trend = PressureTrend(trend=TrendDirection.RISING, change_per_3_hours=1.2, description="Rising")
    result = score_songbird_migration(180, trend, "spring")
    assert result.score == 75
    assert result.details[1] == "Rising pressure - birds moving"


def test_songbird_activity_midday_heat():
    """Test midday and heat penalties outweigh clear skies."""
    midday = score_songbird_activity(90, 0, 5, 13)
    dawn = score_songbird_activity(90, 0, 5, 7)
    assert midday.score == 60
    assert midday.score < dawn.score
    assert midday.details == (
        "Midday lull",
        "Clear skies - birds active",
        "Hot - early morning only",
        "Calm winds - easy spotting",
    )


def test_songbird_activity_warm_breezy_dusk():
    """Test the warm band between 75 and 85 degrees."""
    result = score_songbird_activity(80, 3, 20, 18)
    assert result.score == 70
    assert result.details == (
        "Evening activity",
        "Overcast - extended activity",
        "Warm - avoid midday",
        "Breezy - check sheltered spots",
    )


def test_songbird_activity_storm_night():
    """Test heavy precipitation at night with no time-of-day message."""
    result = score_songbird_activity(30, 95, 30, 23)
    assert result.score == 15
    assert len(result.details) == 3


def test_songbird_activity_fog():
    """Test foggy cool mornings."""
    result = score_songbird_activity(45, 48, 10, 10)
    assert result.score == 70
    assert result.details == (
        "Foggy - check sheltered areas",
        "Cool - morning activity best",
        "Light winds - good conditions",
    )


# --- Shorebirds ---


def test_shorebirds_ideal():
    """Test onshore winds after rain."""
    result = score_shorebirds(90, 10, 3, 16093)
    assert result.score == 100
    assert result.details == (
        "Onshore winds",
        "Recent rain - exposed mudflats",
        "Good visibility",
        "Calm conditions for feeding",
    )


def test_shorebirds_poor():
    """Test offshore gale in fog."""
    result = score_shorebirds(270, 30, 0, 1000)
    assert result.score == 15
    assert result.details == ("Offshore winds", "Poor visibility", "Too windy")


# --- Waterfowl ---


def test_waterfowl_cold_front():
    """Test cold, breezy, clear with falling pressure."""
    result = score_waterfowl(30, 15, 16093, "falling")
    assert result.score == 100
    assert result.details[-1] == "Storm pushing birds"


def test_waterfowl_warm_gale():
    """Test low visibility has no message."""
    result = score_waterfowl(65, 35, 1000, "rising")
    assert result.score == 15
    assert result.details == ("Too warm for waterfowl activity", "Winds too strong")


def test_waterfowl_calm_falling_fast():
    """Test the underscore falling-fast spelling also counts as falling."""
    expected = score_waterfowl(45, 3, 5000, "falling-fast")
    assert expected.score == 75
    assert score_waterfowl(45, 3, 5000, "falling_fast") == expected


# --- Owling ---


def test_owling_prime_night():
    """Test a calm, clear, cool night."""
    result = score_owling(5, 45, 0, 60, 22)
    assert result.score == 100
    assert result.details[0] == "Prime owling hours"


def test_owling_daytime_storm():
    """Test daytime roosting with bad weather floors at zero."""
    result = score_owling(20, 70, 61, 95, 12)
    assert result.score == 0
    assert result.rating is Rating.UNFAVORABLE


def test_owling_twilight_partly_cloudy():
    """Test twilight with moderate wind carries no wind message."""
    result = score_owling(10, 30, 2, 80, 7)
    assert result.score == 70
    assert result.details == ("Twilight - some owl activity", "Partly cloudy")


@pytest.mark.parametrize(
    "hour,message",
    [
        (5, "Prime owling hours"),
        (6, "Twilight - some owl activity"),
        (10, "Daytime - owls roosting"),
        (17, "Daytime - owls roosting"),
        (18, "Twilight - some owl activity"),
        (20, "Prime owling hours"),
    ],
)
def test_owling_time_bands(hour, message):
    """Test owling time-of-day boundaries."""
    assert score_owling(10, 45, 2, 80, hour).details[0] == message


# --- Properties ---

WIND_DIRECTIONS = [0, 45, 135, 200, 270, 315]
WIND_SPEEDS = [0, 7, 12, 22, 30, 45]
TEMPERATURES = [10, 33, 45, 60, 80, 95]
WEATHER_CODES = [0, 3, 45, 61, 95]
HOURS = [3, 7, 13, 18, 22]


def _all_results():
    for direction, speed in itertools.product(WIND_DIRECTIONS, WIND_SPEEDS):
        yield score_hawk_watch(direction, speed, 500)
        yield score_hawk_watch(direction, speed, 30000)
        yield score_seabirding(direction, speed, 10, "gulf")
        yield score_shorebirds(direction, speed, 0, 30000)
        for trend in TrendDirection:
            yield score_songbird_migration(direction, trend, "spring")
    for temp, code, hour in itertools.product(TEMPERATURES, WEATHER_CODES, HOURS):
        yield score_songbird_activity(temp, code, 3, hour)
        yield score_owling(30, temp, code, 95, hour)
        yield score_owling(0, temp, code, 40, hour)
        yield score_waterfowl(temp, 15, 30000, "falling-fast")


def test_scores_bounded_and_rated_consistently():
    """Test every score stays in [0, 100] with its derived rating."""
    for result in _all_results():
        assert 0 <= result.score <= 100
        assert isinstance(result.score, int)
        assert result.rating is rating_for(result.score)


def test_scorers_are_idempotent():
    """Test repeated calls give identical output."""
    calls = [
        lambda: score_hawk_watch(300, 18, 12000),
        lambda: score_seabirding(100, 22, 3, "east"),
        lambda: score_songbird_migration(200, "rising", "spring"),
        lambda: score_songbird_activity(62, 2, 6, 6),
        lambda: score_shorebirds(120, 8, 1, 9000),
        lambda: score_waterfowl(38, 12, 15000, "steady"),
        lambda: score_owling(4, 40, 0, 55, 23),
    ]
    for call in calls:
        assert call() == call()
        assert call().to_dict() == call().to_dict()
