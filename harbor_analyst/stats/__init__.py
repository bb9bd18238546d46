"""Push statistics computed over a built registry.

Every statistic is a pure function of the registry and a parameter struct. It
returns a :class:`ChartSeries` subclass that satisfies the
:class:`BarChartable` contract used by the chart and PDF renderers.

Public API
----------
pushes_by_hour_of_day
    Pushes per hour of day, ascending by hour.
top_pushed_repositories
    Repositories with the most pushes.
top_pushing_users
    Users with the most pushes.
lookup_stats_method
    Resolve a configured statistic name to its :class:`StatsMethod`.

Example:
>>> from harbor_analyst.stats import (
...     TopPushingUsersParameters,
...     top_pushing_users,
... )
>>> chart = top_pushing_users(registry, TopPushingUsersParameters(max_elements=5))
>>> chart.set_title("Most active users")
>>> chart.ordered_bar_chart_values()

"""

from harbor_analyst.stats.catalogue import (
    LEGACY_ALIASES,
    STATS_METHODS,
    StatsMethod,
    available_methods,
    lookup_stats_method,
)
from harbor_analyst.stats.chart import BarChartable, BarChartValue, ChartSeries
from harbor_analyst.stats.errors import InvalidParameters, InvariantViolation, StatsError
from harbor_analyst.stats.parameters import (
    NO_START_DATE,
    PushesByHourOfDayParameters,
    StatsParameters,
    TopPushedRepositoriesParameters,
    TopPushingUsersParameters,
)
from harbor_analyst.stats.pushes_by_hour import (
    HourlyPushCount,
    PushesPerHourOfDay,
    pushes_by_hour_of_day,
)
from harbor_analyst.stats.top_repositories import (
    PushesPerRepository,
    RepositoryPushCount,
    top_pushed_repositories,
)
from harbor_analyst.stats.top_users import (
    PushesPerUser,
    UserPushCount,
    top_pushing_users,
)

__all__ = [
    "LEGACY_ALIASES",
    "NO_START_DATE",
    "STATS_METHODS",
    "BarChartValue",
    "BarChartable",
    "ChartSeries",
    "HourlyPushCount",
    "InvalidParameters",
    "InvariantViolation",
    "PushesByHourOfDayParameters",
    "PushesPerHourOfDay",
    "PushesPerRepository",
    "PushesPerUser",
    "RepositoryPushCount",
    "StatsError",
    "StatsMethod",
    "StatsParameters",
    "TopPushedRepositoriesParameters",
    "TopPushingUsersParameters",
    "UserPushCount",
    "available_methods",
    "lookup_stats_method",
    "pushes_by_hour_of_day",
    "top_pushed_repositories",
    "top_pushing_users",
]
