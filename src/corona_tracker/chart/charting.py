"""
Render a report's first location as a line chart (confirmed/deaths/recovered).
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional, Tuple

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.ticker import FuncFormatter

from corona_tracker.api.errors import EmptyLocationsError, RenderError
from corona_tracker.api.schemas import METRICS, Location, Report
from corona_tracker.chart.timeline import sort_timeline, to_xy
from corona_tracker.utils.config import (
    CHART_HEIGHT_IN,
    CHART_WIDTH_IN,
    SERIES_LABELS,
    TICK_DATE_FORMAT,
    TITLE_TIME_FORMAT,
    X_LABEL,
    Y_LABEL,
)

log = logging.getLogger(__name__)

# (marker, linestyle) per series, cycled in metric order
_STYLES = [("o", "-"), ("^", "--"), ("s", ":")]


def chart_title(location: Location) -> str:
    return f"Corona in {location.country} from {location.last_updated.strftime(TITLE_TIME_FORMAT)}"


def _format_tick(x: float, _pos) -> str:
    return datetime.fromtimestamp(x, tz=timezone.utc).strftime(TICK_DATE_FORMAT)


def build_figure(
    location: Location,
    *,
    labels: Optional[Dict[str, str]] = None,
    size: Tuple[float, float] = (CHART_WIDTH_IN, CHART_HEIGHT_IN),
    dpi: Optional[float] = None,
) -> Figure:
    """
    Draw the three metric timelines of one location. The caller closes the figure.
    """
    series_labels = {**SERIES_LABELS, **(labels or {})}
    fig, ax = plt.subplots(figsize=size, dpi=dpi)
    try:
        ax.set_title(chart_title(location))
        ax.set_xlabel(X_LABEL)
        ax.set_ylabel(Y_LABEL)
        ax.xaxis.set_major_formatter(FuncFormatter(_format_tick))

        for metric, (marker, linestyle) in zip(METRICS, _STYLES):
            xs, ys = to_xy(sort_timeline(location.timeline(metric)))
            ax.plot(xs, ys, marker=marker, linestyle=linestyle, label=series_labels[metric])

        ax.legend(loc="upper left")
    except Exception:
        plt.close(fig)
        raise
    return fig


def render_report(
    report: Report,
    output_path: str | Path,
    *,
    labels: Optional[Dict[str, str]] = None,
    size: Tuple[float, float] = (CHART_WIDTH_IN, CHART_HEIGHT_IN),
    dpi: Optional[float] = None,
) -> Path:
    """
    Plot the three metric timelines of `report.locations[0]` and save the image.

    Args:
        report: Fetched report; must contain at least one location.
        output_path: Target file. The extension selects the format (PNG expected).
        labels: Optional legend labels per metric, merged over SERIES_LABELS.
        size: Canvas size in inches (width, height).
        dpi: Resolution; None keeps matplotlib's default.

    Returns:
        The saved path.

    Raises:
        EmptyLocationsError: If the report has no locations.
        RenderError: If the chart cannot be built or written.
    """
    if not report.locations:
        raise EmptyLocationsError("Report has no locations to plot.")

    location = report.locations[0]
    path = Path(output_path)

    fig = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fig = build_figure(location, labels=labels, size=size, dpi=dpi)
        fig.savefig(path)
    except (OSError, ValueError, TypeError, RuntimeError) as exc:
        raise RenderError(f"Could not render chart to {path}: {exc}") from exc
    finally:
        if fig is not None:
            plt.close(fig)

    log.info("Chart for %s saved to %s", location.country, path)
    return path
