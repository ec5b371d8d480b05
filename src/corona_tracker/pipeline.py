# src/corona_tracker/pipeline.py
"""
Fetch -> render orchestration.

Each call builds a fresh Report, renders it and lets it go; nothing is cached
between calls. The client and renderer are injectable for tests.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, Optional

from corona_tracker.api.client import CoronaClient
from corona_tracker.api.schemas import Report
from corona_tracker.chart.charting import render_report

log = logging.getLogger(__name__)


def build_chart(
    country_code: str,
    output_path: str | Path,
    *,
    client: Optional[CoronaClient] = None,
    renderer: Callable[[Report, Path], Path] = render_report,
) -> Optional[Path]:
    """
    Fetch the report for `country_code` (with timelines) and render its chart.

    Parameters
    ----------
    country_code : str
        ISO country code, e.g. 'DE'.
    output_path : str | Path
        Target image file.
    client : Optional[CoronaClient]
        Custom client (for tests/mocks). Defaults to a new CoronaClient().
    renderer : Callable[[Report, Path], Path]
        Function that renders a report to a path.

    Returns
    -------
    Optional[Path]
        The saved path, or None when no data could be fetched.

    Raises
    ------
    ReportDecodeError
        If the API answered with a body that is not a report.
    RenderError
        If the chart could not be rendered (including EmptyLocationsError).
    """
    t0 = time.perf_counter()
    owns_client = client is None
    client = client or CoronaClient()
    try:
        report = client.fetch(country_code, include_timelines=True)
    finally:
        if owns_client:
            client.close()
    fetch_ms = int((time.perf_counter() - t0) * 1000)

    if report is None:
        log.warning("No data for country_code=%s; chart not rendered", country_code)
        return None

    t_render = time.perf_counter()
    path = renderer(report, Path(output_path))
    render_ms = int((time.perf_counter() - t_render) * 1000)

    log.info(
        "chart_built fetch_ms=%d render_ms=%d locations=%d",
        fetch_ms,
        render_ms,
        len(report.locations),
    )
    return path
