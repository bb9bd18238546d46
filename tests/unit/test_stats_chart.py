"""Unit tests for the chart-data contract and the stats catalogue."""

from __future__ import annotations

import pytest

from harbor_analyst.registry import Registry
from harbor_analyst.stats import (
    LEGACY_ALIASES,
    BarChartable,
    BarChartValue,
    InvariantViolation,
    PushesByHourOfDayParameters,
    PushesPerRepository,
    PushesPerUser,
    RepositoryPushCount,
    TopPushingUsersParameters,
    UserPushCount,
    available_methods,
    lookup_stats_method,
)


class TestChartTitle:
    """The write-once title of every chart."""

    def test_title_can_be_set_once(self) -> None:
        """A set title is returned unchanged."""
        chart = PushesPerUser()

        chart.set_title("Most active users")

        assert chart.title == "Most active users"
        assert chart.has_title

    def test_reading_unset_title_fails(self) -> None:
        """Reading before setting is an invariant violation."""
        chart = PushesPerUser()

        assert not chart.has_title
        with pytest.raises(InvariantViolation, match="read before it was set"):
            _ = chart.title

    def test_second_title_is_refused(self) -> None:
        """A title cannot be replaced."""
        chart = PushesPerUser()
        chart.set_title("first")

        with pytest.raises(InvariantViolation, match="already set"):
            chart.set_title("second")
        assert chart.title == "first", "Expected the first title to survive"

    @pytest.mark.parametrize("title", ["", "   "])
    def test_blank_title_is_refused(self, title: str) -> None:
        """Blank titles are rejected."""
        chart = PushesPerUser()

        with pytest.raises(InvariantViolation, match="must not be empty"):
            chart.set_title(title)

    def test_repr_does_not_need_a_title(self) -> None:
        """repr is safe on an untitled chart."""
        chart = PushesPerUser([UserPushCount(user_name="alice", push_count=1)])

        assert repr(chart) == "PushesPerUser(entries=1, title='')"


class TestBarValues:
    """Conversion of entries into labelled bars."""

    def test_bars_follow_entry_order(self) -> None:
        """Bars are produced in the order the entries were given."""
        chart = PushesPerRepository(
            [
                RepositoryPushCount(repository_name="demo/web", push_count=5),
                RepositoryPushCount(repository_name="demo/app", push_count=2),
            ]
        )

        assert chart.ordered_bar_chart_values() == (
            BarChartValue(label="demo/web", value=5),
            BarChartValue(label="demo/app", value=2),
        )

    def test_series_satisfy_the_bar_chartable_protocol(self) -> None:
        """Renderers can depend on the protocol alone."""
        assert isinstance(PushesPerUser(), BarChartable)


class TestCatalogue:
    """Name-based lookup of stats methods."""

    def test_available_methods_are_listed_in_order(self) -> None:
        """Canonical names are exposed in definition order."""
        assert available_methods() == (
            "PushesByHourOfDay",
            "TopPushedRepositories",
            "TopPushingUsers",
        )

    @pytest.mark.parametrize(("alias", "canonical"), sorted(LEGACY_ALIASES.items()))
    def test_legacy_names_resolve_to_canonical_methods(
        self, alias: str, canonical: str
    ) -> None:
        """Older configuration files keep working."""
        method = lookup_stats_method(alias)

        assert method is not None
        assert method.name == canonical

    def test_unknown_name_returns_none(self) -> None:
        """Unknown names are not an exception at lookup time."""
        assert lookup_stats_method("MostPulledImages") is None

    def test_calling_with_wrong_parameter_type_fails(self) -> None:
        """Each method only accepts its own parameter struct."""
        method = lookup_stats_method("TopPushingUsers")
        assert method is not None

        with pytest.raises(TypeError, match="expects TopPushingUsersParameters"):
            method(Registry(), PushesByHourOfDayParameters())

    def test_calling_runs_the_statistic(self) -> None:
        """A catalogue entry runs its function against the registry."""
        method = lookup_stats_method("TopPushingUsers")
        assert method is not None

        chart = method(Registry(), TopPushingUsersParameters(max_elements=3))

        assert isinstance(chart, PushesPerUser)
        assert len(chart) == 0
