"""Pushes grouped by the hour of day they happened in."""

from __future__ import annotations

import collections
import typing as typ

import msgspec

from harbor_analyst.stats.chart import BarChartValue, ChartSeries

if typ.TYPE_CHECKING:
    from harbor_analyst.registry.models import Registry
    from harbor_analyst.stats.parameters import PushesByHourOfDayParameters

METHOD_NAME = "PushesByHourOfDay"


class HourlyPushCount(msgspec.Struct, frozen=True):
    """Number of pushes made during one hour of the day (0-23)."""

    hour: int
    push_count: int


class PushesPerHourOfDay(ChartSeries[HourlyPushCount]):
    """Push counts per hour of day, ascending by hour."""

    def _bar_for(self, entry: HourlyPushCount) -> BarChartValue:
        return BarChartValue(label=f"{entry.hour}:00", value=entry.push_count)


def pushes_by_hour_of_day(
    registry: Registry, params: PushesByHourOfDayParameters
) -> PushesPerHourOfDay:
    """Count pushes since ``params.start_date`` per hour of day.

    Hours without any qualifying push are left out. Entries are ordered by
    hour, not by count.
    """
    params.validate(METHOD_NAME)

    per_hour: collections.Counter[int] = collections.Counter(
        push.timestamp.hour
        for _repository, push in registry.iter_pushes()
        if push.timestamp >= params.start_date
    )
    return PushesPerHourOfDay(
        HourlyPushCount(hour=hour, push_count=count)
        for hour, count in sorted(per_hour.items())
    )
