"""Unit tests for binding chart configuration to stats methods."""

from __future__ import annotations

import datetime as dt

import pytest

from harbor_analyst.config import (
    AnalystConfig,
    ConfigurationError,
    bind_chart,
    bind_charts,
    format_title_template,
)
from harbor_analyst.stats import (
    NO_START_DATE,
    InvalidParameters,
    PushesByHourOfDayParameters,
    TopPushedRepositoriesParameters,
    TopPushingUsersParameters,
)
from tests.helpers.registry_rows import demo_export

NOW = dt.datetime(2024, 3, 31, 12, 0)


def _clock() -> dt.datetime:
    return NOW


class TestFormatTitleTemplate:
    """Placeholder substitution in chart titles."""

    @pytest.mark.parametrize(
        ("template", "expected"),
        [
            pytest.param("Since {{ startDate }}", "Since 2024-03-01", id="spaced"),
            pytest.param("Since {{startDate}}", "Since 2024-03-01", id="compact"),
            pytest.param(
                "{{ startDate }} to now ({{ startDate }})",
                "2024-03-01 to now (2024-03-01)",
                id="repeated",
            ),
            pytest.param("Static title", "Static title", id="no-placeholder"),
        ],
    )
    def test_substitutes_start_date(self, template: str, expected: str) -> None:
        """Every placeholder is replaced with the ISO date."""
        assert format_title_template(template, dt.datetime(2024, 3, 1, 8, 30)) == (
            expected
        )

    def test_unbounded_start_date_formats_as_year_one(self) -> None:
        """Without a period the title shows the earliest representable date."""
        assert format_title_template("Since {{ startDate }}", NO_START_DATE) == (
            "Since 0001-01-01"
        )


class TestBindChart:
    """Turning one chart mapping into a runnable method."""

    def test_binds_top_repositories_with_all_parameters(self) -> None:
        """camelCase keys are converted into the method's parameter struct."""
        bound = bind_chart(
            0,
            {
                "statsMethodName": "TopPushedRepositories",
                "titleTemplate": "Top repos since {{ startDate }}",
                "timePeriodInDays": 30,
                "maxElements": 5,
                "ignoreRepositoryNames": ["library/busybox"],
            },
            clock=_clock,
        )

        assert bound.method.name == "TopPushedRepositories"
        assert bound.title == "Top repos since 2024-03-01"
        assert bound.parameters == TopPushedRepositoriesParameters(
            start_date=dt.datetime(2024, 3, 1, 12, 0),
            max_elements=5,
            ignore_repository_names=frozenset({"library/busybox"}),
        )

    def test_missing_period_means_no_start_date(self) -> None:
        """Without timePeriodInDays every push qualifies."""
        bound = bind_chart(
            0,
            {"statsMethodName": "PushesByHourOfDay", "titleTemplate": "All pushes"},
            clock=_clock,
        )

        assert bound.parameters == PushesByHourOfDayParameters()
        assert bound.parameters.start_date == NO_START_DATE

    def test_legacy_method_name_is_accepted(self) -> None:
        """Older method names bind to the canonical statistic."""
        bound = bind_chart(
            0,
            {
                "statsMethodName": "GetMostPushingUsers",
                "titleTemplate": "Users",
                "maxElements": 3,
            },
        )

        assert bound.method.name == "TopPushingUsers"
        assert isinstance(bound.parameters, TopPushingUsersParameters)

    @pytest.mark.parametrize(
        ("chart", "fragment"),
        [
            pytest.param(
                {"titleTemplate": "x"},
                "statsMethodName must be a string",
                id="missing-method",
            ),
            pytest.param(
                {"statsMethodName": "MostPulled", "titleTemplate": "x"},
                "unknown statsMethodName 'MostPulled'",
                id="unknown-method",
            ),
            pytest.param(
                {"statsMethodName": "PushesByHourOfDay"},
                "titleTemplate must be a string",
                id="missing-title",
            ),
            pytest.param(
                {"statsMethodName": "PushesByHourOfDay", "titleTemplate": "  "},
                "titleTemplate must not be empty",
                id="blank-title",
            ),
            pytest.param(
                {
                    "statsMethodName": "PushesByHourOfDay",
                    "titleTemplate": "x",
                    "timePeriodInDays": "30",
                },
                "timePeriodInDays must be an integer",
                id="period-string",
            ),
            pytest.param(
                {
                    "statsMethodName": "PushesByHourOfDay",
                    "titleTemplate": "x",
                    "timePeriodInDays": True,
                },
                "timePeriodInDays must be an integer",
                id="period-bool",
            ),
            pytest.param(
                {
                    "statsMethodName": "PushesByHourOfDay",
                    "titleTemplate": "x",
                    "timePeriodInDays": -1,
                },
                "must not be negative",
                id="period-negative",
            ),
            pytest.param(
                {
                    "statsMethodName": "PushesByHourOfDay",
                    "titleTemplate": "x",
                    "timePeriodInDays": 1_000_000,
                },
                "timePeriodInDays 1000000 reaches before year 1",
                id="period-overflow",
            ),
            pytest.param(
                {
                    "statsMethodName": "PushesByHourOfDay",
                    "titleTemplate": "x",
                    "startDate": "2024-01-01",
                },
                "startDate cannot be set directly",
                id="start-date",
            ),
            pytest.param(
                {"statsMethodName": "TopPushingUsers", "titleTemplate": "x"},
                "invalid parameters for TopPushingUsers",
                id="missing-max-elements",
            ),
            pytest.param(
                {
                    "statsMethodName": "TopPushingUsers",
                    "titleTemplate": "x",
                    "maxElements": "ten",
                },
                "invalid parameters for TopPushingUsers",
                id="max-elements-type",
            ),
            pytest.param(
                {
                    "statsMethodName": "PushesByHourOfDay",
                    "titleTemplate": "x",
                    "maxElements": 3,
                },
                "invalid parameters for PushesByHourOfDay",
                id="unknown-parameter",
            ),
        ],
    )
    def test_rejects_invalid_chart(
        self, chart: dict[str, object], fragment: str
    ) -> None:
        """Each problem is reported with the chart index."""
        with pytest.raises(ConfigurationError) as excinfo:
            bind_chart(2, chart, clock=_clock)

        message = str(excinfo.value)
        assert message.startswith("charts[2]: "), message
        assert fragment in message, message

    def test_zero_max_elements_binds_but_fails_when_run(self) -> None:
        """Range checks belong to the statistic, not to configuration."""
        bound = bind_chart(
            0,
            {
                "statsMethodName": "TopPushingUsers",
                "titleTemplate": "x",
                "maxElements": 0,
            },
        )

        with pytest.raises(InvalidParameters):
            bound.call(demo_export().build().registry)


def test_bind_charts_preserves_order_and_call_sets_title() -> None:
    """Charts bind in configuration order and running one titles the result."""
    config = AnalystConfig(
        charts=[
            {"statsMethodName": "PushesByHourOfDay", "titleTemplate": "Hours"},
            {
                "statsMethodName": "TopPushingUsers",
                "titleTemplate": "Users since {{ startDate }}",
                "timePeriodInDays": 0,
                "maxElements": 1,
            },
        ]
    )

    bound = bind_charts(config, clock=_clock)

    assert [method.method.name for method in bound] == [
        "PushesByHourOfDay",
        "TopPushingUsers",
    ]
    assert bound[1].parameters.start_date == NOW
    chart = bound[1].call(demo_export().build().registry)
    assert chart.title == "Users since 2024-03-31"
