"""FastAPI main application."""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional
from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field, field_validator
from ...application.services.birding_conditions_service import BirdingConditionsService
from ...domain.analysis.coastal import classify_coast
from ...domain.analysis.units import to_naive_utc
from ...domain.entities.coast import CoastalClassification, CoastOrientation
from ...domain.entities.season import Season
from ...domain.entities.time_series_point import TimeSeriesPoint
from ...domain.entities.weather_observation import WeatherObservation
from ...domain.entities.weather_snapshot import WeatherSnapshot
from ...infrastructure.repositories.file_weather_repository import FileWeatherRepository
from config.settings import API_SETTINGS, LOG_FORMAT, LOG_LEVEL, SUMMARY_SETTINGS, WEATHER_DATA_FILE

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=API_SETTINGS["title"],
    description=API_SETTINGS["description"],
    version=API_SETTINGS["version"],
)

# File-backed lookups are only available when a data file is present
weather_repo = FileWeatherRepository(str(WEATHER_DATA_FILE)) if WEATHER_DATA_FILE.exists() else None
if weather_repo is None:
    logger.warning(f"Weather data file {WEATHER_DATA_FILE} not found; GET /conditions disabled")

service = BirdingConditionsService(weather_repo=weather_repo, **SUMMARY_SETTINGS)


# Request/Response models
class ObservationModel(BaseModel):
    """Current conditions, already in scoring units."""

    temperature: float = Field(..., description="Temperature in Fahrenheit")
    wind_direction: float = Field(..., ge=0, le=360, description="Direction the wind blows from, degrees")
    wind_speed: float = Field(..., ge=0, description="Wind speed in mph")
    visibility: float = Field(..., ge=0, description="Visibility in meters")
    humidity: float = Field(..., ge=0, le=100, description="Relative humidity percentage")
    precipitation_6h: float = Field(0.0, ge=0, description="Precipitation over the last 6 hours in mm")
    weather_code: int = Field(..., ge=0, description="WMO weather code")
    hour: int = Field(..., ge=0, le=23, description="Local hour of day")


class SampleModel(BaseModel):
    """One timestamped history sample."""

    timestamp: datetime
    value: float

    @field_validator("timestamp")
    @classmethod
    def naive_utc_timestamp(cls, value: datetime) -> datetime:
        return to_naive_utc(value)


class ConditionsRequest(BaseModel):
    """Request model for scoring conditions."""

    observation: ObservationModel
    pressure_history: List[SampleModel] = Field(default_factory=list, description="hPa, oldest first")
    temperature_history: List[SampleModel] = Field(default_factory=list, description="Fahrenheit, oldest first")
    observed_at: Optional[datetime] = Field(None, description="Observation time (defaults to now)")
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    coast: Optional[CoastOrientation] = Field(
        None, description="Explicit coast orientation; overrides the coordinate lookup"
    )
    season: Optional[Season] = Field(None, description="Season (defaults to the observation month)")

    @field_validator("observed_at")
    @classmethod
    def naive_utc_observed_at(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(value) if value is not None else None


class ScoreResponse(BaseModel):
    """One category score."""

    score: int
    rating: str
    details: List[str]


class ConditionsResponse(BaseModel):
    """Response model for scored conditions. Null scores are not applicable."""

    season: str
    coastal: Dict[str, Any]
    scores: Dict[str, Optional[ScoreResponse]]
    pressure_trend: Dict[str, Any]
    front_passage: Dict[str, Any]
    fallout_risk: Dict[str, Any]


def _resolve_coastal(request: ConditionsRequest) -> CoastalClassification:
    if request.coast is not None:
        return CoastalClassification.coastal(request.coast)
    if request.latitude is not None and request.longitude is not None:
        return classify_coast(request.latitude, request.longitude)
    return CoastalClassification.inland()


def _to_snapshot(request: ConditionsRequest) -> WeatherSnapshot:
    return WeatherSnapshot(
        observation=WeatherObservation(**request.observation.model_dump()),
        observed_at=request.observed_at or datetime.now(),
        pressure_history=tuple(
            TimeSeriesPoint(timestamp=p.timestamp, value=p.value) for p in request.pressure_history
        ),
        temperature_history=tuple(
            TimeSeriesPoint(timestamp=p.timestamp, value=p.value) for p in request.temperature_history
        ),
    )


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Birding Conditions API",
        "version": API_SETTINGS["version"],
        "endpoints": {
            "conditions": "/conditions",
            "health": "/health",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "weather_file": weather_repo is not None}


@app.post("/conditions", response_model=ConditionsResponse)
async def score_conditions(request: ConditionsRequest) -> ConditionsResponse:
    """
    Score birding conditions from a posted observation and histories.

    Args:
        request: Observation, histories and location hints

    Returns:
        Scores, pressure trend, front passage and fallout risk
    """
    try:
        report = service.assess(_to_snapshot(request), _resolve_coastal(request), request.season)
        return ConditionsResponse(**report.to_dict())
    except ValueError as e:
        logger.warning(f"Rejected conditions request: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Scoring error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/conditions", response_model=ConditionsResponse)
async def location_conditions(
    latitude: float = Query(..., ge=-90, le=90),
    longitude: float = Query(..., ge=-180, le=180),
    location: Optional[str] = None,
    at: Optional[datetime] = None,
) -> ConditionsResponse:
    """Score birding conditions from the configured hourly weather file."""
    if weather_repo is None:
        raise HTTPException(status_code=503, detail="No weather data file configured")

    try:
        report = service.assess_location(latitude, longitude, location=location, at=at)
        return ConditionsResponse(**report.to_dict())
    except ValueError as e:
        logger.warning(f"Rejected conditions lookup: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Conditions lookup error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=API_SETTINGS["host"], port=API_SETTINGS["port"])
