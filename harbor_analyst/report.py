"""Run a complete harbor-analyst report.

The run is strictly sequential and aborts on the first fatal error:

1. load and bind the chart configuration,
2. load the CSV snapshot and build the registry (warnings are logged),
3. compute every statistic and attach its title,
4. render one PNG per statistic,
5. assemble ``report.pdf``.

No artefact is written before every statistic has been computed, so a bad
parameter never leaves a partial report behind.
"""

from __future__ import annotations

import dataclasses
import typing as typ

import msgspec

from harbor_analyst.common.time import local_now
from harbor_analyst.config import (
    ConfigurationError,
    bind_charts,
    load_analyst_config,
)
from harbor_analyst.ingest import SnapshotError, load_snapshot
from harbor_analyst.logging import get_logger, log_info, log_warning
from harbor_analyst.output import (
    PDFSection,
    ReportOutputError,
    build_pdf,
    chart_file_name,
    render_bar_chart,
)
from harbor_analyst.registry import RegistryError, build_registry
from harbor_analyst.stats import BarChartValue, StatsError

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from harbor_analyst.common.time import Clock
    from harbor_analyst.config import AnalystSettings, ChartStatsMethod
    from harbor_analyst.registry import BuildResult, Registry
    from harbor_analyst.stats import ChartSeries

logger = get_logger(__name__)

# Every error that aborts a run; anything else is a defect.
REPORT_ERRORS: tuple[type[Exception], ...] = (
    ConfigurationError,
    SnapshotError,
    RegistryError,
    StatsError,
    ReportOutputError,
)


class ChartDump(msgspec.Struct, kw_only=True, frozen=True):
    """JSON form of one computed statistic."""

    title: str
    values: tuple[BarChartValue, ...]


@dataclasses.dataclass(frozen=True, slots=True)
class ReportRun:
    """Artefacts and intermediate results of a finished run."""

    build: BuildResult
    charts: tuple[ChartSeries[typ.Any], ...]
    chart_files: tuple[Path, ...]
    pdf_path: Path


def log_build_warnings(build: BuildResult) -> None:
    """Log each recoverable build warning, then a summary."""
    for warning in build.warnings:
        log_warning(logger, "%s", warning)
    if build.warnings:
        log_info(
            logger,
            "Registry built with %d warning(s); affected rows were skipped",
            len(build.warnings),
        )


def compute_charts(
    registry: Registry, methods: cabc.Sequence[ChartStatsMethod]
) -> tuple[ChartSeries[typ.Any], ...]:
    """Run every configured statistic against ``registry`` in order."""
    charts = []
    for method in methods:
        log_info(logger, "Computing %s: %s", method.method.name, method.title)
        charts.append(method.call(registry))
    return tuple(charts)


def write_chart_json(path: Path, charts: cabc.Iterable[ChartSeries[typ.Any]]) -> Path:
    """Write the computed statistics to ``path`` as a JSON array."""
    dumps = [
        ChartDump(title=chart.title, values=chart.ordered_bar_chart_values())
        for chart in charts
    ]
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(msgspec.json.encode(dumps))
    except OSError as exc:
        raise ReportOutputError(path, str(exc)) from exc
    return path


def _render_charts(
    out_dir: Path, charts: cabc.Sequence[ChartSeries[typ.Any]]
) -> tuple[Path, ...]:
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ReportOutputError(out_dir, str(exc)) from exc
    return tuple(
        render_bar_chart(chart, out_dir / chart_file_name(index, chart.title))
        for index, chart in enumerate(charts)
    )


def run_report(settings: AnalystSettings, *, clock: Clock = local_now) -> ReportRun:
    """Produce the PDF report described by ``settings``.

    Parameters
    ----------
    settings
        Snapshot, configuration and output locations.
    clock
        Source of "now" for reporting periods and the creation date.

    Returns
    -------
    ReportRun
        The build result, computed charts and written artefacts.

    Raises
    ------
    ConfigurationError, SnapshotError, RegistryError, StatsError, ReportOutputError
        On the first fatal problem; nothing further is attempted.

    """
    config = load_analyst_config(settings.config_path)
    methods = bind_charts(config, clock=clock)
    log_info(
        logger,
        "Loaded %d chart definition(s) from %s",
        len(methods),
        settings.config_path,
    )

    snapshot = load_snapshot(settings.snapshot_dir)
    build = build_registry(*snapshot.record_sets())
    log_info(
        logger,
        "Built registry with %d project(s) from %s",
        len(build.registry.projects),
        settings.snapshot_dir,
    )
    log_build_warnings(build)

    charts = compute_charts(build.registry, methods)
    chart_files = _render_charts(settings.out_dir, charts)
    pdf_path = build_pdf(
        settings.pdf_path,
        [PDFSection(description=config.description, chart_files=chart_files)],
        report_title=config.title,
        generated_at=clock(),
    )
    log_info(logger, "Wrote %s with %d chart(s)", pdf_path, len(chart_files))

    if settings.json_out is not None:
        write_chart_json(settings.json_out, charts)

    return ReportRun(
        build=build,
        charts=charts,
        chart_files=chart_files,
        pdf_path=pdf_path,
    )
