"""Assemble chart images into a PDF report.

The report is a sequence of A4 portrait pages written with matplotlib's
``PdfPages``. The first page opens with the report heading and the creation
date; each :class:`PDFSection` then contributes its title, an optional
description and its chart images, stacked top to bottom. A chart that does not
fit on the current page starts a new one.
"""

from __future__ import annotations

import dataclasses
import textwrap
import typing as typ

from matplotlib.backends.backend_pdf import PdfPages
from matplotlib.figure import Figure
from matplotlib.image import imread

from harbor_analyst.common.time import GENERATED_AT_FORMAT
from harbor_analyst.output.errors import ReportOutputError

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    import datetime as dt
    from pathlib import Path

A4_PORTRAIT = (8.27, 11.69)
MARGIN = 0.05
CONTENT_WIDTH = 1.0 - 2 * MARGIN
DESCRIPTION_WRAP = 95
_POINTS_PER_INCH = 72.0
_LINE_SPACING = 1.6
_GAP = 0.015


@dataclasses.dataclass(frozen=True, slots=True)
class PDFSection:
    """A titled group of charts.

    Attributes
    ----------
    title
        Section heading; omitted when empty.
    description
        Paragraph printed under the heading; omitted when empty.
    chart_files
        PNG files printed in order, one below the other.

    """

    title: str = ""
    description: str = ""
    chart_files: tuple[Path, ...] = ()


class _PageCursor:
    """Tracks the current page and the vertical position on it.

    Positions are figure fractions measured from the bottom, so the cursor
    starts just below the top margin and moves down.
    """

    def __init__(self, pdf: PdfPages) -> None:
        self._pdf = pdf
        self._figure: Figure | None = None
        self._top = 1.0 - MARGIN

    def _page(self) -> Figure:
        if self._figure is None:
            self._figure = Figure(figsize=A4_PORTRAIT)
            self._top = 1.0 - MARGIN
        return self._figure

    def _line_height(self, font_size: float) -> float:
        return font_size * _LINE_SPACING / _POINTS_PER_INCH / A4_PORTRAIT[1]

    def new_page(self) -> None:
        if self._figure is not None:
            self._pdf.savefig(self._figure)
        self._figure = None

    def text(self, content: str, *, font_size: float, bold: bool = False) -> None:
        lines = content.splitlines() or [""]
        height = self._line_height(font_size) * len(lines)
        if self._figure is not None and self._top - height < MARGIN:
            self.new_page()
        page = self._page()
        page.text(
            MARGIN,
            self._top,
            "\n".join(lines),
            fontsize=font_size,
            fontweight="bold" if bold else "normal",
            va="top",
            ha="left",
        )
        self._top -= height + _GAP

    def image(self, path: Path) -> None:
        pixels = imread(path)
        pixel_height, pixel_width = pixels.shape[:2]
        page_ratio = A4_PORTRAIT[0] / A4_PORTRAIT[1]
        height = min(
            CONTENT_WIDTH * (pixel_height / pixel_width) * page_ratio,
            1.0 - 2 * MARGIN,
        )
        if self._figure is not None and self._top - height < MARGIN:
            self.new_page()
        page = self._page()
        axes = page.add_axes((MARGIN, self._top - height, CONTENT_WIDTH, height))
        axes.imshow(pixels)
        axes.set_axis_off()
        self._top -= height + _GAP

    def finish(self) -> None:
        self.new_page()


def build_pdf(
    path: Path,
    sections: cabc.Iterable[PDFSection],
    *,
    report_title: str,
    generated_at: dt.datetime,
) -> Path:
    """Write the PDF report to ``path``.

    Parameters
    ----------
    path
        Destination file; its parent directory must exist.
    sections
        Sections in the order they should appear.
    report_title
        Heading of the first page.
    generated_at
        Creation timestamp printed under the heading.

    Returns
    -------
    Path
        ``path``, for convenience in call chains.

    Raises
    ------
    ReportOutputError
        If a chart image cannot be read or the PDF cannot be written. No
        partial PDF is left behind.

    """
    try:
        with PdfPages(
            path, metadata={"Title": report_title, "Creator": "harbor-analyst"}
        ) as pdf:
            cursor = _PageCursor(pdf)
            cursor.text(report_title, font_size=16, bold=True)
            cursor.text(
                "Date of Document Creation: "
                f"{generated_at.strftime(GENERATED_AT_FORMAT)}",
                font_size=12,
                bold=True,
            )
            for section in sections:
                _add_section(cursor, section)
            cursor.finish()
    except (OSError, ValueError) as exc:
        path.unlink(missing_ok=True)
        raise ReportOutputError(path, str(exc)) from exc
    return path


def _add_section(cursor: _PageCursor, section: PDFSection) -> None:
    if section.title:
        cursor.text(section.title, font_size=14, bold=True)
    if section.description:
        cursor.text(
            textwrap.fill(section.description, width=DESCRIPTION_WRAP), font_size=10
        )
    for chart_file in section.chart_files:
        cursor.image(chart_file)
