"""Tests for domain entities."""

import pytest
from datetime import datetime
from src.domain.entities.coast import CoastalClassification, CoastOrientation
from src.domain.entities.fallout_risk import FalloutLevel, FalloutRisk
from src.domain.entities.front_passage import FrontPassage, FrontType, BirdingImpact
from src.domain.entities.pressure_trend import PressureTrend, TrendDirection
from src.domain.entities.score_result import Rating, ScoreResult
from src.domain.entities.season import Season
from src.domain.entities.time_series_point import TimeSeriesPoint


def test_score_result():
    """Test ScoreResult entity."""
    result = ScoreResult(score=72, rating=Rating.GOOD, details=("Onshore winds", "Good visibility"))
    assert result.summary == "Onshore winds"
    assert str(result) == "72 (Good)"
    assert result.to_dict() == {
        "score": 72,
        "rating": "Good",
        "details": ["Onshore winds", "Good visibility"],
    }


def test_score_result_empty_summary():
    """Test summary of a result without details."""
    assert ScoreResult(score=0, rating=Rating.UNFAVORABLE).summary == ""


@pytest.mark.parametrize(
    "value,expected",
    [
        ("rising-fast", TrendDirection.RISING_FAST),
        ("falling-fast", TrendDirection.FALLING_FAST),
        ("falling_fast", TrendDirection.FALLING_FAST),
        ("RISING_FAST", TrendDirection.RISING_FAST),
        ("steady", TrendDirection.STEADY),
        ("sideways", TrendDirection.UNKNOWN),
        (None, TrendDirection.UNKNOWN),
        ("", TrendDirection.UNKNOWN),
        (TrendDirection.FALLING, TrendDirection.FALLING),
    ],
)
def test_trend_direction_parse(value, expected):
    """Test both hyphen and underscore spellings parse to the same trend."""
    assert TrendDirection.parse(value) is expected


def test_trend_direction_parse_pressure_trend():
    """Test a PressureTrend parses to its direction."""
    trend = PressureTrend(trend=TrendDirection.RISING, change_per_3_hours=1.0, description="Rising")
    assert TrendDirection.parse(trend) is TrendDirection.RISING


def test_trend_direction_flags():
    """Test falling/rising helpers."""
    assert TrendDirection.FALLING.is_falling
    assert TrendDirection.FALLING_FAST.is_falling
    assert not TrendDirection.STEADY.is_falling
    assert TrendDirection.RISING_FAST.is_rising
    assert not TrendDirection.UNKNOWN.is_rising


def test_pressure_trend_unknown():
    """Test the insufficient-data sentinel."""
    trend = PressureTrend.unknown("Insufficient data")
    assert trend.trend is TrendDirection.UNKNOWN
    assert trend.change_per_3_hours == 0.0
    assert trend.to_dict()["trend"] == "unknown"


@pytest.mark.parametrize(
    "month,expected",
    [
        (1, Season.WINTER),
        (3, Season.SPRING),
        (5, Season.SPRING),
        (7, Season.WINTER),
        (8, Season.FALL),
        (11, Season.FALL),
        (12, Season.WINTER),
    ],
)
def test_season_from_month(month, expected):
    """Test Season derivation from calendar month."""
    assert Season.from_month(month) is expected


def test_season_parse():
    """Test Season parsing."""
    assert Season.parse("Spring") is Season.SPRING
    assert Season.parse(Season.FALL) is Season.FALL
    assert Season.SPRING.is_migration
    assert not Season.WINTER.is_migration
    with pytest.raises(ValueError):
        Season.parse("summer")


def test_coastal_classification():
    """Test CoastalClassification constructors."""
    coastal = CoastalClassification.coastal("gulf")
    assert coastal.is_coastal
    assert coastal.orientation is CoastOrientation.GULF
    assert coastal.to_dict() == {"is_coastal": True, "orientation": "gulf"}

    inland = CoastalClassification.inland()
    assert not inland.is_coastal
    assert inland.to_dict() == {"is_coastal": False, "orientation": None}


def test_coast_orientation_defaults_to_east():
    """Test unknown orientations fall back to the east coast."""
    assert CoastOrientation.parse("north") is CoastOrientation.EAST
    assert CoastOrientation.parse(None) is CoastOrientation.EAST


def test_front_passage_to_dict():
    """Test FrontPassage serialization."""
    front = FrontPassage(
        detected=True,
        front_type=FrontType.POST_COLD,
        birding_impact=BirdingImpact.POSITIVE,
        message="Cold front passed",
        temperature_change=-4.0,
    )
    assert front.to_dict()["type"] == "post-cold"
    assert FrontPassage(detected=False).to_dict()["type"] is None


def test_fallout_risk():
    """Test FalloutRisk entity."""
    risk = FalloutRisk(level=FalloutLevel.HIGH, message="Strong", risk_score=9)
    assert str(risk) == "high"
    assert risk.to_dict()["risk_score"] == 9


def test_time_series_point():
    """Test TimeSeriesPoint entity."""
    point = TimeSeriesPoint(timestamp=datetime(2024, 5, 1, 6, 0), value=1012.5)
    assert point.to_dict() == {"timestamp": "2024-05-01T06:00:00", "value": 1012.5}
