"""Coastal/inland classification from coordinates."""

from ..entities.coast import CoastalClassification, CoastOrientation


def classify_coast(latitude: float, longitude: float) -> CoastalClassification:
    """
    Classify a location as coastal (and which coast) with a US bounding-box heuristic.

    The Great Lakes are treated as inland. Most of Florida is treated as east
    coast.
    """
    is_east_coast = -82 < longitude < -66 and 25 < latitude < 45
    is_west_coast = longitude < -117 and 32 < latitude < 49
    is_gulf_coast = -97 < longitude < -80 and 25 < latitude < 31
    is_florida = 24.5 < latitude < 31 and -87.6 < longitude < -80
    is_great_lakes = 41 < latitude < 49 and -92 < longitude < -76

    if is_great_lakes:
        return CoastalClassification.inland()
    if is_florida or is_east_coast:
        return CoastalClassification.coastal(CoastOrientation.EAST)
    if is_west_coast:
        return CoastalClassification.coastal(CoastOrientation.WEST)
    if is_gulf_coast:
        return CoastalClassification.coastal(CoastOrientation.GULF)
    return CoastalClassification.inland()
