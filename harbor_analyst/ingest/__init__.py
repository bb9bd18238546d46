"""Loading of Harbor database CSV exports."""

from __future__ import annotations

from .errors import SnapshotError
from .reader import (
    ACCESS_LOG_FILE,
    PROJECT_FILE,
    REPOSITORY_FILE,
    USER_FILE,
    Snapshot,
    load_snapshot,
    read_csv_rows,
)

__all__ = [
    "ACCESS_LOG_FILE",
    "PROJECT_FILE",
    "REPOSITORY_FILE",
    "USER_FILE",
    "Snapshot",
    "SnapshotError",
    "load_snapshot",
    "read_csv_rows",
]
