"""
Global configuration for Corona Tracker.

Centralizes the API endpoint, HTTP and chart parameters, and output paths.
All values can be overridden via environment variables (or a .env file
loaded by the runner scripts).
"""
from __future__ import annotations

import os
from pathlib import Path

# Project root: .../corona-tracker
PROJECT_ROOT = Path(__file__).resolve().parents[3]

# Remote API
API_BASE_URL = os.getenv(
    "CORONA_API_BASE_URL", "https://coronavirus-tracker-api.herokuapp.com/"
)
LOCATIONS_ENDPOINT = "v2/locations"

# HTTP timeout in seconds; 0 disables it (requests waits indefinitely)
HTTP_TIMEOUT = float(os.getenv("CORONA_HTTP_TIMEOUT", "30")) or None

# Defaults for the runner
DEFAULT_COUNTRY_CODE = os.getenv("CORONA_COUNTRY_CODE", "DE")
DEFAULT_OUTPUT_PATH = Path(
    os.getenv("CORONA_OUTPUT_PATH", PROJECT_ROOT / "reports" / "assets" / "corona.png")
)

# Chart
CHART_WIDTH_IN = float(os.getenv("CHART_WIDTH_IN", "4"))
CHART_HEIGHT_IN = float(os.getenv("CHART_HEIGHT_IN", "3"))
TITLE_TIME_FORMAT = "%d.%m.%Y %H:%M:%S"
TICK_DATE_FORMAT = "%d.%m.%Y"
X_LABEL = "Datum"
Y_LABEL = "Personen"

# Legend labels per metric. "Recoverd" is the label existing charts carry.
SERIES_LABELS = {
    "confirmed": "Confirmed",
    "deaths": "Deaths",
    "recovered": os.getenv("CORONA_RECOVERED_LABEL", "Recoverd"),
}
