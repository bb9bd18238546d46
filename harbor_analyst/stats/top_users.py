"""Users ranked by the number of pushes they made."""

from __future__ import annotations

import collections
import typing as typ

import msgspec

from harbor_analyst.stats.chart import BarChartValue, ChartSeries

if typ.TYPE_CHECKING:
    from harbor_analyst.registry.models import Registry
    from harbor_analyst.stats.parameters import TopPushingUsersParameters

METHOD_NAME = "TopPushingUsers"


class UserPushCount(msgspec.Struct, frozen=True):
    """Number of pushes made by one user."""

    user_name: str
    push_count: int


class PushesPerUser(ChartSeries[UserPushCount]):
    """Push counts per user, most active first."""

    def _bar_for(self, entry: UserPushCount) -> BarChartValue:
        return BarChartValue(label=entry.user_name, value=entry.push_count)


def top_pushing_users(
    registry: Registry, params: TopPushingUsersParameters
) -> PushesPerUser:
    """Rank users by pushes since ``params.start_date``.

    Pushes whose user could not be resolved during the build are not counted,
    nor are pushes by users in ``params.ignore_user_names``. Entries are sorted
    by descending count, ties by user name, and cut to ``params.max_elements``.

    Raises
    ------
    InvalidParameters
        If ``params.max_elements`` is below 1.

    """
    params.validate(METHOD_NAME)

    per_user: collections.Counter[str] = collections.Counter(
        push.user.name
        for _repository, push in registry.iter_pushes()
        if push.user is not None
        and push.user.name not in params.ignore_user_names
        and push.timestamp >= params.start_date
    )
    ranked = sorted(per_user.items(), key=lambda item: (-item[1], item[0]))
    return PushesPerUser(
        UserPushCount(user_name=name, push_count=count)
        for name, count in ranked[: params.max_elements]
    )
