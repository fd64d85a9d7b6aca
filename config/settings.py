"""Application settings and configuration."""

import os
from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).parent.parent

# Data paths
DATA_DIR = BASE_DIR / "data"
WEATHER_DATA_FILE = Path(os.getenv("BIRDING_WEATHER_FILE", str(DATA_DIR / "hourly_weather.csv")))

# Refresh-cycle windows
SUMMARY_SETTINGS = {
    "history_hours": 12,  # pressure/temperature samples kept for trends
    "precipitation_hours": 6,
}

# Logging
LOG_LEVEL = os.getenv("BIRDING_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# API settings
API_SETTINGS = {
    "title": "Birding Conditions API",
    "description": "Birding activity scores from current weather and recent trends",
    "version": "1.0.0",
    "host": os.getenv("BIRDING_API_HOST", "0.0.0.0"),
    "port": int(os.getenv("BIRDING_API_PORT", "8000")),
}
