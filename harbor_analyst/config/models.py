"""Typed structure of ``analyst.yaml``."""

from __future__ import annotations

import typing as typ

import msgspec

DEFAULT_REPORT_TITLE = "Harbor Analytics Report"


class AnalystConfig(msgspec.Struct, kw_only=True):
    """Report configuration.

    Attributes
    ----------
    title
        Heading printed at the top of the PDF report.
    description
        Optional paragraph printed under the heading.
    charts
        One mapping per chart, in report order. Each mapping names its
        statistic under ``statsMethodName``, its title under
        ``titleTemplate`` and may set ``timePeriodInDays`` plus any parameter
        the statistic accepts.

    """

    charts: list[dict[str, typ.Any]]
    title: str = DEFAULT_REPORT_TITLE
    description: str = ""
