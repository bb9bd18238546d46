"""Report artefacts: bar chart images and the assembled PDF.

Public API
----------
render_bar_chart
    Draw one :class:`~harbor_analyst.stats.BarChartable` as a PNG file.
chart_file_name
    Stable file name for a chart image.
build_pdf
    Lay out :class:`PDFSection` entries into ``report.pdf``.
ReportOutputError
    Raised when an artefact cannot be written.

"""

from harbor_analyst.output.barchart import chart_file_name, render_bar_chart
from harbor_analyst.output.errors import ReportOutputError
from harbor_analyst.output.pdf import PDFSection, build_pdf

__all__ = [
    "PDFSection",
    "ReportOutputError",
    "build_pdf",
    "chart_file_name",
    "render_bar_chart",
]
