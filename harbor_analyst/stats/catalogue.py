"""Name-keyed catalogue of the available stats methods.

Charts name the statistic they plot; the catalogue turns that name into the
parameter struct to build and the function to call. Adding a statistic means
adding one :class:`StatsMethod` entry here.
"""

from __future__ import annotations

import dataclasses
import typing as typ

from harbor_analyst.stats import pushes_by_hour, top_repositories, top_users
from harbor_analyst.stats.parameters import (
    PushesByHourOfDayParameters,
    StatsParameters,
    TopPushedRepositoriesParameters,
    TopPushingUsersParameters,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from harbor_analyst.registry.models import Registry
    from harbor_analyst.stats.chart import ChartSeries


@dataclasses.dataclass(frozen=True, slots=True)
class StatsMethod:
    """A statistic and the parameter struct it accepts."""

    name: str
    parameters_type: type[StatsParameters]
    function: cabc.Callable[[Registry, typ.Any], ChartSeries[typ.Any]]

    def __call__(
        self, registry: Registry, params: StatsParameters
    ) -> ChartSeries[typ.Any]:
        """Run the statistic against ``registry``."""
        if not isinstance(params, self.parameters_type):
            msg = (
                f"{self.name} expects {self.parameters_type.__name__}, "
                f"got {type(params).__name__}"
            )
            raise TypeError(msg)
        return self.function(registry, params)


_METHODS = (
    StatsMethod(
        name=pushes_by_hour.METHOD_NAME,
        parameters_type=PushesByHourOfDayParameters,
        function=pushes_by_hour.pushes_by_hour_of_day,
    ),
    StatsMethod(
        name=top_repositories.METHOD_NAME,
        parameters_type=TopPushedRepositoriesParameters,
        function=top_repositories.top_pushed_repositories,
    ),
    StatsMethod(
        name=top_users.METHOD_NAME,
        parameters_type=TopPushingUsersParameters,
        function=top_users.top_pushing_users,
    ),
)

STATS_METHODS: dict[str, StatsMethod] = {method.name: method for method in _METHODS}

# Older method names still found in analyst.yaml files.
LEGACY_ALIASES: dict[str, str] = {
    "GetPushesPerDaytimes": pushes_by_hour.METHOD_NAME,
    "GetMostPushedToRepositories": top_repositories.METHOD_NAME,
    "GetMostPushingUsers": top_users.METHOD_NAME,
}


def available_methods() -> tuple[str, ...]:
    """Return the canonical method names in definition order."""
    return tuple(STATS_METHODS)


def lookup_stats_method(name: str) -> StatsMethod | None:
    """Return the method called ``name`` (or its legacy alias), if any."""
    return STATS_METHODS.get(LEGACY_ALIASES.get(name, name))
