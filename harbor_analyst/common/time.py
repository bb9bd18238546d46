"""Timestamp formats and reporting-period helpers.

Harbor exports timestamps as naive ``YYYY-MM-DD HH:MM:SS`` strings. They are
parsed into naive datetimes and compared against naive start dates, so hours
of day are reported exactly as they appear in the export.
"""

from __future__ import annotations

import datetime as dt
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
GENERATED_AT_FORMAT = "%Y-%m-%d %H:%M"

type Clock = cabc.Callable[[], dt.datetime]


def local_now() -> dt.datetime:
    """Return the current naive local time."""
    return dt.datetime.now()  # noqa: DTZ005 - exports carry naive local timestamps


def parse_timestamp(value: str) -> dt.datetime:
    """Parse an export timestamp.

    Raises
    ------
    ValueError
        If ``value`` does not match ``YYYY-MM-DD HH:MM:SS``.

    """
    return dt.datetime.strptime(value.strip(), TIMESTAMP_FORMAT)  # noqa: DTZ007


def start_date_from_period(
    period_in_days: int, *, clock: Clock = local_now
) -> dt.datetime:
    """Return the moment ``period_in_days`` days before ``clock()``.

    >>> fixed = lambda: dt.datetime(2024, 1, 31, 12, 0)
    >>> start_date_from_period(30, clock=fixed)
    datetime.datetime(2024, 1, 1, 12, 0)

    """
    return clock() - dt.timedelta(days=period_in_days)


def format_date(value: dt.datetime) -> str:
    """Format ``value`` as ``YYYY-MM-DD``, zero-padding years below 1000."""
    return value.date().isoformat()
