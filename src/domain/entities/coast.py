"""Coast orientation and coastal classification entities."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union


class CoastOrientation(str, Enum):
    """Which coast a location sits on; determines the onshore wind arc."""

    EAST = "east"
    WEST = "west"
    GULF = "gulf"

    @classmethod
    def parse(cls, value: Union["CoastOrientation", str, None]) -> "CoastOrientation":
        """Coerce a value into an orientation, defaulting to the east coast."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.EAST


@dataclass(frozen=True)
class CoastalClassification:
    """Represents whether a location is coastal and, if so, which coast."""

    is_coastal: bool
    orientation: Optional[CoastOrientation] = None

    @classmethod
    def inland(cls) -> "CoastalClassification":
        return cls(is_coastal=False)

    @classmethod
    def coastal(cls, orientation: Union[CoastOrientation, str]) -> "CoastalClassification":
        return cls(is_coastal=True, orientation=CoastOrientation.parse(orientation))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_coastal": self.is_coastal,
            "orientation": self.orientation.value if self.orientation else None,
        }
