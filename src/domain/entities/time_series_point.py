"""Time series point entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TimeSeriesPoint:
    """A single timestamped sample (pressure in hPa or temperature)."""

    timestamp: datetime
    value: float

    def to_dict(self) -> dict:
        return {"timestamp": self.timestamp.isoformat(), "value": self.value}
