# src/corona_tracker/api/schemas.py
from __future__ import annotations

"""
Typed data models for the coronavirus-tracker `/v2/locations` payload.

Field names are identical to the wire format (snake_case), so decoding is a
plain `model_validate` and encoding a `model_dump(mode="json")`:

    {
      "latest": {"confirmed": int, "deaths": int, "recovered": int},
      "locations": [
        {
          "coordinates": {"latitude": str, "longitude": str},
          "country": str, "country_code": str, "id": int,
          "last_updated": ISO-8601, "latest": {...}, "province": str,
          "timelines": {
            "confirmed": {"latest": int, "timeline": {ISO-8601: int, ...}},
            "deaths": {...}, "recovered": {...}
          }
        }
      ]
    }
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, Field

# Timestamp -> cumulative count. Iteration order carries no meaning.
Timeline = Dict[datetime, int]

METRICS: Tuple[str, ...] = ("confirmed", "deaths", "recovered")


class Latest(BaseModel):
    """Aggregate counts at the time of the last update."""

    confirmed: int = Field(..., description="Confirmed cases.")
    deaths: int = Field(..., description="Deaths.")
    recovered: int = Field(..., description="Recovered cases.")


class Coordinates(BaseModel):
    """Location coordinates; the API sends them as text."""

    latitude: str = Field(..., description="Latitude as sent by the API.")
    longitude: str = Field(..., description="Longitude as sent by the API.")


class MetricSeries(BaseModel):
    """
    One metric of a location.

    Attributes:
        latest: Most recent count.
        timeline: Unordered mapping timestamp -> count. Empty when the API was
            queried with timelines=false.
    """

    latest: int = Field(..., description="Most recent count.")
    timeline: Timeline = Field(
        default_factory=dict, description="Timestamp -> cumulative count."
    )


class Timelines(BaseModel):
    """Bundle of the three metric series of a location."""

    confirmed: MetricSeries
    deaths: MetricSeries
    recovered: MetricSeries

    def series(self) -> List[Tuple[str, MetricSeries]]:
        """Return (metric, series) pairs in the fixed order confirmed, deaths, recovered."""
        return [(name, getattr(self, name)) for name in METRICS]


class Location(BaseModel):
    """
    One reporting unit (country or province).

    Attributes:
        coordinates: Latitude/longitude as text.
        country: Country name (e.g. 'Germany').
        country_code: ISO country code (e.g. 'DE').
        id: API identifier of the location.
        last_updated: Timestamp of the last data update.
        latest: Aggregate counts.
        province: Province name; empty for country-level entries.
        timelines: Per-metric time series; None when the API was queried
            with timelines=false and left them out.
    """

    coordinates: Coordinates
    country: str
    country_code: str
    id: int
    last_updated: datetime
    latest: Latest
    province: str = ""
    timelines: Optional[Timelines] = None

    def timeline(self, metric: str) -> Timeline:
        """Return the timeline of one metric; empty when timelines are absent."""
        if self.timelines is None:
            return {}
        return getattr(self.timelines, metric).timeline


class Report(BaseModel):
    """
    Full API response: global latest totals plus all location entries.

    A report with an empty `locations` list is valid; the renderer refuses it
    explicitly.
    """

    latest: Latest
    locations: List[Location]

    @classmethod
    def from_wire(cls, payload: Mapping[str, Any]) -> "Report":
        """Validate a decoded JSON payload. Raises pydantic.ValidationError."""
        return cls.model_validate(payload)

    def to_wire(self) -> Dict[str, Any]:
        """Dump to the JSON-compatible wire shape (timestamps as ISO-8601 strings)."""
        return self.model_dump(mode="json", exclude_none=True)


class TimelinePoint(BaseModel):
    """
    A single (timestamp, count) pair produced by sorting a Timeline.

    Attributes:
        timestamp: Observation time.
        count: Cumulative count at that time.
    """

    timestamp: datetime = Field(..., description="Observation time.")
    count: int = Field(..., description="Count at timestamp.")

    @property
    def unix(self) -> float:
        """Seconds since the epoch; naive timestamps are taken as UTC."""
        ts = self.timestamp
        if ts.tzinfo is None:
            ts = ts.replace(tzinfo=timezone.utc)
        return ts.timestamp()
