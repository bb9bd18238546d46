"""Bind chart configuration entries to executable stats methods.

A chart entry is a free-form mapping::

    statsMethodName: TopPushedRepositories
    titleTemplate: "Most pushed-to repositories since {{ startDate }}"
    timePeriodInDays: 30
    maxElements: 10
    ignoreRepositoryNames: [library/busybox]

``statsMethodName``, ``titleTemplate`` and ``timePeriodInDays`` are handled
here; every other key must be a parameter of the named statistic and is
converted into its parameter struct. Anything unknown or wrongly typed is a
:class:`ConfigurationError`.
"""

from __future__ import annotations

import dataclasses
import re
import typing as typ

import msgspec

from harbor_analyst.common.time import (
    format_date,
    local_now,
    start_date_from_period,
)
from harbor_analyst.config.errors import ConfigurationError
from harbor_analyst.stats.catalogue import available_methods, lookup_stats_method
from harbor_analyst.stats.parameters import NO_START_DATE

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    import datetime as dt

    from harbor_analyst.common.time import Clock
    from harbor_analyst.config.models import AnalystConfig
    from harbor_analyst.registry.models import Registry
    from harbor_analyst.stats.catalogue import StatsMethod
    from harbor_analyst.stats.chart import ChartSeries
    from harbor_analyst.stats.parameters import StatsParameters

STATS_METHOD_KEY = "statsMethodName"
TITLE_TEMPLATE_KEY = "titleTemplate"
TIME_PERIOD_KEY = "timePeriodInDays"
START_DATE_KEY = "startDate"

_RESERVED_KEYS = frozenset({STATS_METHOD_KEY, TITLE_TEMPLATE_KEY, TIME_PERIOD_KEY})
_START_DATE_PLACEHOLDER = re.compile(r"\{\{\s*startDate\s*\}\}")


@dataclasses.dataclass(frozen=True, slots=True)
class ChartStatsMethod:
    """A configured statistic ready to run.

    Attributes
    ----------
    method
        The catalogue entry to call.
    parameters
        Validated parameters, including the computed start date.
    title
        Chart title with placeholders already substituted.

    """

    method: StatsMethod
    parameters: StatsParameters
    title: str

    def call(self, registry: Registry) -> ChartSeries[typ.Any]:
        """Run the statistic and attach the configured title to the result."""
        chart = self.method(registry, self.parameters)
        chart.set_title(self.title)
        return chart


def format_title_template(template: str, start_date: dt.datetime) -> str:
    """Substitute ``{{ startDate }}`` in ``template`` with ``YYYY-MM-DD``.

    >>> import datetime as dt
    >>> format_title_template("Since {{ startDate }}", dt.datetime(2024, 1, 2))
    'Since 2024-01-02'

    """
    return _START_DATE_PLACEHOLDER.sub(format_date(start_date), template)


def _require_method(index: int, chart: cabc.Mapping[str, object]) -> StatsMethod:
    name = chart.get(STATS_METHOD_KEY)
    if not isinstance(name, str):
        raise ConfigurationError.for_chart(
            index, f"{STATS_METHOD_KEY} must be a string, got {name!r}"
        )
    method = lookup_stats_method(name)
    if method is None:
        known = ", ".join(available_methods())
        raise ConfigurationError.for_chart(
            index, f"unknown {STATS_METHOD_KEY} {name!r} (expected one of: {known})"
        )
    return method


def _require_title_template(index: int, chart: cabc.Mapping[str, object]) -> str:
    template = chart.get(TITLE_TEMPLATE_KEY)
    if not isinstance(template, str):
        raise ConfigurationError.for_chart(
            index, f"{TITLE_TEMPLATE_KEY} must be a string, got {template!r}"
        )
    if not template.strip():
        raise ConfigurationError.for_chart(
            index, f"{TITLE_TEMPLATE_KEY} must not be empty"
        )
    return template


def _start_date(
    index: int, chart: cabc.Mapping[str, object], clock: Clock
) -> dt.datetime:
    if TIME_PERIOD_KEY not in chart:
        return NO_START_DATE

    period = chart[TIME_PERIOD_KEY]
    # bool is an int subclass; YAML ``true`` is not a period.
    if isinstance(period, bool) or not isinstance(period, int):
        raise ConfigurationError.for_chart(
            index, f"{TIME_PERIOD_KEY} must be an integer, got {period!r}"
        )
    if period < 0:
        raise ConfigurationError.for_chart(
            index, f"{TIME_PERIOD_KEY} must not be negative, got {period}"
        )
    try:
        return start_date_from_period(period, clock=clock)
    except OverflowError as exc:
        raise ConfigurationError.for_chart(
            index, f"{TIME_PERIOD_KEY} {period} reaches before year 1"
        ) from exc


def _convert_parameters(
    index: int,
    method: StatsMethod,
    chart: cabc.Mapping[str, object],
    start_date: dt.datetime,
) -> StatsParameters:
    if START_DATE_KEY in chart:
        raise ConfigurationError.for_chart(
            index,
            f"{START_DATE_KEY} cannot be set directly; use {TIME_PERIOD_KEY}",
        )

    raw = {key: value for key, value in chart.items() if key not in _RESERVED_KEYS}
    try:
        params = msgspec.convert(raw, type=method.parameters_type)
    except msgspec.ValidationError as exc:
        raise ConfigurationError.for_chart(
            index, f"invalid parameters for {method.name}: {exc}"
        ) from exc
    return msgspec.structs.replace(params, start_date=start_date)


def bind_chart(
    index: int,
    chart: cabc.Mapping[str, object],
    *,
    clock: Clock = local_now,
) -> ChartStatsMethod:
    """Turn one chart configuration entry into a :class:`ChartStatsMethod`.

    Parameters
    ----------
    index
        Position of the entry in ``charts``; used in error messages.
    chart
        The raw configuration mapping.
    clock
        Source of "now" for ``timePeriodInDays``.

    Raises
    ------
    ConfigurationError
        If the method is unknown, a reserved key has the wrong type, or the
        remaining keys do not fit the method's parameters.

    """
    method = _require_method(index, chart)
    template = _require_title_template(index, chart)
    start_date = _start_date(index, chart, clock)
    parameters = _convert_parameters(index, method, chart, start_date)
    return ChartStatsMethod(
        method=method,
        parameters=parameters,
        title=format_title_template(template, start_date),
    )


def bind_charts(
    config: AnalystConfig, *, clock: Clock = local_now
) -> list[ChartStatsMethod]:
    """Bind every chart of ``config`` in order."""
    return [
        bind_chart(index, chart, clock=clock)
        for index, chart in enumerate(config.charts)
    ]
