"""Analyst configuration: YAML chart definitions and runtime settings.

Quick examples
--------------

Load and bind the charts of a configuration file::

    >>> from harbor_analyst.config import bind_charts, load_analyst_config
    >>> config = load_analyst_config("analyst.yaml")
    >>> methods = bind_charts(config)
    >>> charts = [method.call(registry) for method in methods]

"""

from __future__ import annotations

from .binding import (
    ChartStatsMethod,
    bind_chart,
    bind_charts,
    format_title_template,
)
from .errors import ConfigurationError
from .loader import load_analyst_config, parse_analyst_config
from .models import DEFAULT_REPORT_TITLE, AnalystConfig
from .settings import AnalystSettings

__all__ = [
    "DEFAULT_REPORT_TITLE",
    "AnalystConfig",
    "AnalystSettings",
    "ChartStatsMethod",
    "ConfigurationError",
    "bind_chart",
    "bind_charts",
    "format_title_template",
    "load_analyst_config",
    "parse_analyst_config",
]
