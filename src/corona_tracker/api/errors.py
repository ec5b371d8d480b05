"""
Error taxonomy for fetching and rendering.

Fetch errors are raised by `CoronaClient.fetch_strict`; `CoronaClient.fetch`
turns transport and status failures into `None` and lets decode errors through.
Render errors are raised by `render_report`.
"""
from __future__ import annotations

from typing import Optional


class CoronaTrackerError(Exception):
    """Base class for all errors raised by this package."""


class FetchError(CoronaTrackerError):
    """The report could not be retrieved from the API."""


class TransportError(FetchError):
    """Network-level failure: DNS, refused/reset connection, timeout."""


class HTTPStatusError(FetchError):
    """The API answered with a status other than 200."""

    def __init__(self, status_code: int, url: str, body: Optional[str] = None):
        self.status_code = status_code
        self.url = url
        self.body = body
        super().__init__(f"HTTP {status_code} from {url}")


class ReportDecodeError(FetchError):
    """The response body is not JSON or does not match the report shape."""


class RenderError(CoronaTrackerError):
    """The chart could not be built or written."""


class EmptyLocationsError(RenderError):
    """The report carries no locations, so there is nothing to plot."""
