"""Birding scorers - pure functions from weather inputs to ScoreResult."""

from .common import is_wind_in_range, rating_for, clamp_score, meters_to_miles, build_result
from .hawk_watch import score_hawk_watch
from .seabird import score_seabirding, is_onshore
from .songbird import score_songbird_migration, score_songbird_activity
from .shorebird import score_shorebirds
from .waterfowl import score_waterfowl
from .owling import score_owling

__all__ = [
    "is_wind_in_range",
    "rating_for",
    "clamp_score",
    "meters_to_miles",
    "build_result",
    "score_hawk_watch",
    "score_seabirding",
    "is_onshore",
    "score_songbird_migration",
    "score_songbird_activity",
    "score_shorebirds",
    "score_waterfowl",
    "score_owling",
]
