"""Parameter structs accepted by the stats methods.

Parameters are converted from chart configuration with ``msgspec.convert``;
keys are camelCase in configuration (``maxElements``) and unknown keys are
rejected. ``start_date`` is never read from configuration: the binder derives
it from ``timePeriodInDays``.
"""

from __future__ import annotations

import datetime as dt  # noqa: TC003 - msgspec resolves annotations at runtime

import msgspec

from harbor_analyst.stats.errors import InvalidParameters

# Without a configured period every push qualifies.
NO_START_DATE = dt.datetime.min


class StatsParameters(
    msgspec.Struct,
    kw_only=True,
    frozen=True,
    rename="camel",
    forbid_unknown_fields=True,
):
    """Fields shared by every stats method.

    Attributes
    ----------
    start_date
        Inclusive lower bound on push timestamps.

    """

    start_date: dt.datetime = NO_START_DATE

    def validate(self, method: str) -> None:
        """Raise :class:`InvalidParameters` if the parameters are unusable."""
        del method


class PushesByHourOfDayParameters(StatsParameters, kw_only=True, frozen=True):
    """Parameters of :func:`~harbor_analyst.stats.pushes_by_hour_of_day`."""


class _TopParameters(StatsParameters, kw_only=True, frozen=True):
    max_elements: int

    def validate(self, method: str) -> None:
        """Require at least one element in the result."""
        if self.max_elements < 1:
            raise InvalidParameters(
                method, f"maxElements must be at least 1, got {self.max_elements}"
            )


class TopPushedRepositoriesParameters(_TopParameters, kw_only=True, frozen=True):
    """Parameters of :func:`~harbor_analyst.stats.top_pushed_repositories`.

    Attributes
    ----------
    max_elements
        Maximum number of repositories in the result; must be at least 1.
    ignore_repository_names
        Repositories excluded from the statistic entirely.

    """

    ignore_repository_names: frozenset[str] = msgspec.field(
        default_factory=frozenset
    )


class TopPushingUsersParameters(_TopParameters, kw_only=True, frozen=True):
    """Parameters of :func:`~harbor_analyst.stats.top_pushing_users`.

    Attributes
    ----------
    max_elements
        Maximum number of users in the result; must be at least 1.
    ignore_user_names
        Users whose pushes are not counted.

    """

    ignore_user_names: frozenset[str] = msgspec.field(
        default_factory=frozenset
    )
