"""Season entity."""

from enum import Enum
from typing import Union

SPRING_MONTHS = (3, 4, 5)
FALL_MONTHS = (8, 9, 10, 11)


class Season(str, Enum):
    """Birding season; anything outside the migration windows is winter."""

    SPRING = "spring"
    FALL = "fall"
    WINTER = "winter"

    @classmethod
    def from_month(cls, month: int) -> "Season":
        """Derive the season from a calendar month (1-12)."""
        if month in SPRING_MONTHS:
            return cls.SPRING
        if month in FALL_MONTHS:
            return cls.FALL
        return cls.WINTER

    @classmethod
    def parse(cls, value: Union["Season", str]) -> "Season":
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())

    @property
    def is_migration(self) -> bool:
        return self in (Season.SPRING, Season.FALL)
