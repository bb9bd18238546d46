"""Repositories ranked by the number of pushes they received."""

from __future__ import annotations

import typing as typ

import msgspec

from harbor_analyst.stats.chart import BarChartValue, ChartSeries

if typ.TYPE_CHECKING:
    from harbor_analyst.registry.models import Registry
    from harbor_analyst.stats.parameters import TopPushedRepositoriesParameters

METHOD_NAME = "TopPushedRepositories"


class RepositoryPushCount(msgspec.Struct, frozen=True):
    """Number of pushes to any tag of one repository."""

    repository_name: str
    push_count: int


class PushesPerRepository(ChartSeries[RepositoryPushCount]):
    """Push counts per repository, busiest first."""

    def _bar_for(self, entry: RepositoryPushCount) -> BarChartValue:
        return BarChartValue(label=entry.repository_name, value=entry.push_count)


def top_pushed_repositories(
    registry: Registry, params: TopPushedRepositoriesParameters
) -> PushesPerRepository:
    """Rank repositories by pushes since ``params.start_date``.

    Every repository outside ``params.ignore_repository_names`` gets an entry,
    including repositories without qualifying pushes. Entries are sorted by
    descending count, ties by repository name, and cut to
    ``params.max_elements``.

    Raises
    ------
    InvalidParameters
        If ``params.max_elements`` is below 1.

    """
    params.validate(METHOD_NAME)

    counts = [
        RepositoryPushCount(
            repository_name=repository.name,
            push_count=sum(
                1
                for push in repository.iter_pushes()
                if push.timestamp >= params.start_date
            ),
        )
        for repository in registry.iter_repositories()
        if repository.name not in params.ignore_repository_names
    ]
    counts.sort(key=lambda entry: (-entry.push_count, entry.repository_name))
    return PushesPerRepository(counts[: params.max_elements])
