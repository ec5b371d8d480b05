"""
HTTP client for the coronavirus-tracker API.

`CoronaClient.fetch` issues a single GET against `{base}/v2/locations` and
returns a validated `Report`, or `None` when the API cannot be reached or
answers with a non-200 status. A body that cannot be decoded into a report
raises `ReportDecodeError`. There are no retries.

The HTTP session is injectable so tests can mount a fake transport adapter.
"""
from __future__ import annotations

import logging
from typing import Optional

import requests
from pydantic import ValidationError

from corona_tracker.api.errors import HTTPStatusError, ReportDecodeError, TransportError
from corona_tracker.api.schemas import Report
from corona_tracker.utils.config import API_BASE_URL, HTTP_TIMEOUT, LOCATIONS_ENDPOINT

log = logging.getLogger(__name__)


class CoronaClient:
    """Minimal read-only client for the `/v2/locations` endpoint."""

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        *,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = HTTP_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()

    @property
    def locations_url(self) -> str:
        return self.base_url + LOCATIONS_ENDPOINT

    def fetch_strict(self, country_code: str, include_timelines: bool = True) -> Report:
        """
        Fetch the report for one country, raising on every failure.

        Args:
            country_code: ISO country code, e.g. 'DE'. Required.
            include_timelines: Ask the API to include per-day timelines.

        Returns:
            The decoded Report (possibly with zero locations).

        Raises:
            ValueError: If country_code is blank.
            TransportError: On connection, DNS or timeout failures.
            HTTPStatusError: If the status code is not 200.
            ReportDecodeError: If the body is not a valid report.
        """
        code = (country_code or "").strip().upper()
        if not code:
            raise ValueError("country_code is required.")

        params = {
            "country_code": code,
            "timelines": "true" if include_timelines else "false",
        }
        try:
            resp = self.session.get(self.locations_url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise TransportError(f"GET {self.locations_url} failed: {exc}") from exc

        if resp.status_code != 200:
            raise HTTPStatusError(resp.status_code, resp.url or self.locations_url, resp.text)

        try:
            payload = resp.json()
        except ValueError as exc:
            raise ReportDecodeError(f"Response from {resp.url} is not valid JSON: {exc}") from exc
        try:
            return Report.from_wire(payload)
        except ValidationError as exc:
            raise ReportDecodeError(
                f"Response from {resp.url} does not match the report shape: {exc}"
            ) from exc

    def fetch(self, country_code: str, include_timelines: bool = True) -> Optional[Report]:
        """
        Fetch the report for one country.

        Transport and status failures are logged and reported as `None`;
        `ReportDecodeError` propagates.
        """
        try:
            report = self.fetch_strict(country_code, include_timelines)
        except TransportError as exc:
            log.error("Corona API unreachable: %s", exc)
            return None
        except HTTPStatusError as exc:
            log.error("Corona API returned HTTP %d for %s", exc.status_code, exc.url)
            return None
        log.debug("Fetched %d location(s) for %s", len(report.locations), country_code)
        return report

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "CoronaClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def fetch_report(
    country_code: str,
    include_timelines: bool = True,
    *,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = HTTP_TIMEOUT,
) -> Optional[Report]:
    """Fetch a report with a one-off client. See `CoronaClient.fetch`."""
    with CoronaClient(session=session, timeout=timeout) as client:
        return client.fetch(country_code, include_timelines)
