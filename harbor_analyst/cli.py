"""Command-line entry point for generating a registry usage report."""

from __future__ import annotations

import argparse
import dataclasses
import sys
from pathlib import Path

from harbor_analyst.config import AnalystSettings
from harbor_analyst.logging import (
    configure_logging,
    get_logger,
    log_error,
    log_warning,
)
from harbor_analyst.report import REPORT_ERRORS, run_report

logger = get_logger(__name__)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="harbor-analyst",
        description="Build a PDF usage report from a Harbor database CSV export.",
    )
    parser.add_argument(
        "--snapshot-dir",
        type=Path,
        default=None,
        help="Directory containing project.csv, repository.csv, user.csv "
        "and access_log.csv",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file listing the charts to generate",
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=None,
        help="Directory for chart images and report.pdf",
    )
    parser.add_argument("--log-level", default=None, help="femtologging level name")
    parser.add_argument(
        "--json-out",
        type=Path,
        default=None,
        help="Optional path to write the computed statistics as JSON",
    )
    return parser


def _settings_from_args(args: argparse.Namespace) -> AnalystSettings:
    settings = AnalystSettings.from_env()
    overrides = {
        "snapshot_dir": args.snapshot_dir,
        "config_path": args.config,
        "out_dir": args.out_dir,
        "log_level": args.log_level,
        "json_out": args.json_out,
    }
    return dataclasses.replace(
        settings, **{key: value for key, value in overrides.items() if value is not None}
    )


def main(argv: list[str] | None = None) -> int:
    """Generate the report and return a process exit code.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.

    Returns
    -------
    int
        0 when ``report.pdf`` was written, 1 when the run was aborted.

    """
    args = _parser().parse_args(argv)
    settings = _settings_from_args(args)

    level, invalid = configure_logging(settings.log_level)
    if invalid:
        log_warning(logger, "Unknown log level %r; using %s", settings.log_level, level)

    try:
        run = run_report(settings)
    except REPORT_ERRORS as exc:
        log_error(logger, "Report generation aborted: %s", exc)
        print(f"Report generation aborted: {exc}", file=sys.stderr)
        return 1

    print(
        f"report {run.pdf_path} written "
        f"({len(run.chart_files)} charts / {len(run.build.warnings)} warnings)"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
