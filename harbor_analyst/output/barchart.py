"""Render bar-chartable statistics as PNG images.

Figures are created through :class:`matplotlib.figure.Figure` directly so no
pyplot state or interactive backend is involved.
"""

from __future__ import annotations

import re
import typing as typ

from matplotlib.figure import Figure
from matplotlib.ticker import MaxNLocator

from harbor_analyst.output.errors import ReportOutputError

if typ.TYPE_CHECKING:
    from pathlib import Path

    from harbor_analyst.stats.chart import BarChartable

BAR_COLOUR = "#2196A6"
TEXT_COLOUR = "#1A2B3C"
FIGURE_SIZE = (10.0, 5.0)
FIGURE_DPI = 150

# Labels longer than this, or more bars than _MANY_BARS, are drawn slanted.
_LONG_LABEL = 6
_MANY_BARS = 8
_SLUG_PATTERN = re.compile(r"[^a-z0-9]+")


def chart_file_name(index: int, title: str) -> str:
    """Return a stable PNG file name for the ``index``-th chart.

    >>> chart_file_name(0, "Pushes per hour since 2024-01-01")
    '00-pushes-per-hour-since-2024-01-01.png'

    """
    slug = _SLUG_PATTERN.sub("-", title.lower()).strip("-")[:60].rstrip("-")
    return f"{index:02d}-{slug or 'chart'}.png"


def render_bar_chart(chart: BarChartable, path: Path) -> Path:
    """Draw ``chart`` as a bar chart and save it to ``path`` as PNG.

    Parameters
    ----------
    chart
        Statistic with its title already set.
    path
        Destination file; parent directories are created.

    Returns
    -------
    Path
        ``path``, for convenience in call chains.

    Raises
    ------
    InvariantViolation
        If the chart title was never set.
    ReportOutputError
        If the image cannot be written.

    """
    title = chart.title
    values = chart.ordered_bar_chart_values()
    labels = [value.label for value in values]
    heights = [value.value for value in values]
    positions = list(range(len(values)))

    figure = Figure(figsize=FIGURE_SIZE, dpi=FIGURE_DPI)
    axes = figure.add_subplot()
    bars = axes.bar(positions, heights, color=BAR_COLOUR)
    axes.bar_label(bars, color=TEXT_COLOUR)

    slanted = len(labels) > _MANY_BARS or any(len(lbl) > _LONG_LABEL for lbl in labels)
    axes.set_xticks(
        positions,
        labels,
        rotation=45 if slanted else 0,
        ha="right" if slanted else "center",
    )
    axes.yaxis.set_major_locator(MaxNLocator(integer=True))
    axes.set_ylabel("Pushes")
    axes.set_title(title, color=TEXT_COLOUR)
    axes.spines[["top", "right"]].set_visible(False)
    if not values:
        axes.text(
            0.5,
            0.5,
            "No data",
            transform=axes.transAxes,
            ha="center",
            va="center",
            color=TEXT_COLOUR,
        )
    figure.tight_layout()

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        figure.savefig(path, format="png", facecolor="white")
    except OSError as exc:
        raise ReportOutputError(path, str(exc)) from exc
    return path
