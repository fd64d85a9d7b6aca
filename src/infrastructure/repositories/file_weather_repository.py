"""File-based hourly weather repository (Open-Meteo exports)."""

import json
import logging
from pathlib import Path
from typing import Optional
import pandas as pd
from ...domain.repositories.weather_repository import WeatherRepository

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".csv", ".xlsx", ".json")


class FileWeatherRepository(WeatherRepository):
    """Repository for hourly weather stored as CSV, Excel or Open-Meteo JSON."""

    def __init__(self, data_file: str):
        """
        Initialize repository.

        Args:
            data_file: Path to a .csv, .xlsx or .json file with hourly weather.
                Tabular files may carry a 'location' column to hold several
                locations; JSON files hold the 'hourly' block of one
                Open-Meteo forecast response.
        """
        self.data_file = Path(data_file)

        if self.data_file.suffix not in SUPPORTED_SUFFIXES:
            raise ValueError(
                f"Unsupported weather file type '{self.data_file.suffix}', "
                f"expected one of {SUPPORTED_SUFFIXES}"
            )
        if not self.data_file.exists():
            raise FileNotFoundError(f"Weather data file not found: {data_file}")

    def get_hourly_weather(self, location: Optional[str] = None) -> pd.DataFrame:
        """Load hourly weather from file, filtered to a location when the file has several."""
        logger.info(f"Loading hourly weather from {self.data_file} for location={location}")

        try:
            df = self._read()
        except Exception as e:
            logger.error(f"Error loading weather data: {e}")
            raise

        df["time"] = pd.to_datetime(df["time"])

        if location and "location" in df.columns:
            df = df[df["location"] == location].copy()
            if df.empty:
                raise ValueError(f"No hourly weather for location '{location}' in {self.data_file}")

        df = df.sort_values("time").reset_index(drop=True)
        logger.info(f"Loaded {len(df)} hourly records")
        return df

    def _read(self) -> pd.DataFrame:
        if self.data_file.suffix == ".xlsx":
            return pd.read_excel(self.data_file, engine="openpyxl")
        if self.data_file.suffix == ".json":
            with open(self.data_file, "r", encoding="utf-8") as fh:
                payload = json.load(fh)
            hourly = payload.get("hourly", payload)
            return pd.DataFrame(hourly)
        return pd.read_csv(self.data_file)

    def save_hourly_weather(self, frame: pd.DataFrame, location: Optional[str] = None) -> None:
        """Save hourly weather to file, overwriting its contents."""
        logger.info(f"Saving {len(frame)} hourly records to {self.data_file}")

        df = frame.copy()
        if location:
            df["location"] = location

        if self.data_file.suffix == ".json":
            out = df.drop(columns=["location"], errors="ignore")
            out["time"] = pd.to_datetime(out["time"]).dt.strftime("%Y-%m-%dT%H:%M")
            with open(self.data_file, "w", encoding="utf-8") as fh:
                json.dump({"hourly": out.to_dict(orient="list")}, fh)
        elif self.data_file.suffix == ".xlsx":
            df.to_excel(self.data_file, index=False, engine="openpyxl")
        else:
            df.to_csv(self.data_file, index=False)

        logger.info("Hourly weather saved successfully")
