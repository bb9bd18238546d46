r"""Read the CSV files of a Harbor database export.

A snapshot directory holds one CSV file per record set::

    {snapshot_dir}/project.csv
    {snapshot_dir}/repository.csv
    {snapshot_dir}/user.csv
    {snapshot_dir}/access_log.csv

The first line of each file is a header and is skipped. Columns are mapped to
field names by position, so header spelling does not matter. Rows shorter than
the field list keep only the fields they have; the registry builder reports the
missing ones.
"""

from __future__ import annotations

import csv
import dataclasses
import typing as typ
from pathlib import Path

from harbor_analyst.ingest.errors import SnapshotError
from harbor_analyst.registry.rows import (
    ACCESS_LOG_FIELDS,
    PROJECT_FIELDS,
    REPOSITORY_FIELDS,
    USER_FIELDS,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

type CsvRow = dict[str, str]

PROJECT_FILE = "project.csv"
REPOSITORY_FILE = "repository.csv"
USER_FILE = "user.csv"
ACCESS_LOG_FILE = "access_log.csv"


@dataclasses.dataclass(frozen=True, slots=True)
class Snapshot:
    """The four record sets of one export, fully loaded."""

    projects: tuple[CsvRow, ...]
    repositories: tuple[CsvRow, ...]
    users: tuple[CsvRow, ...]
    access_logs: tuple[CsvRow, ...]

    def record_sets(
        self,
    ) -> tuple[
        tuple[CsvRow, ...], tuple[CsvRow, ...], tuple[CsvRow, ...], tuple[CsvRow, ...]
    ]:
        """Return the record sets in ``build_registry`` argument order."""
        return (self.projects, self.repositories, self.users, self.access_logs)


def _map_columns(columns: list[str], fields: cabc.Sequence[str]) -> CsvRow:
    return dict(zip(fields, columns, strict=False))


def read_csv_rows(path: Path, fields: cabc.Sequence[str]) -> tuple[CsvRow, ...]:
    """Read ``path`` and map each data row's columns onto ``fields``.

    Parameters
    ----------
    path
        CSV file whose first line is a header.
    fields
        Field names in column order.

    Returns
    -------
    tuple[dict[str, str], ...]
        One mapping per non-blank data row.

    Raises
    ------
    SnapshotError
        If the file is missing, unreadable or not valid CSV.

    """
    try:
        with path.open(encoding="utf-8", newline="") as handle:
            lines = list(csv.reader(handle))
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise SnapshotError(path, str(exc)) from exc

    return tuple(_map_columns(columns, fields) for columns in lines[1:] if columns)


def load_snapshot(directory: Path | str) -> Snapshot:
    """Load every record set of the snapshot in ``directory``."""
    base = Path(directory)
    return Snapshot(
        projects=read_csv_rows(base / PROJECT_FILE, PROJECT_FIELDS),
        repositories=read_csv_rows(base / REPOSITORY_FILE, REPOSITORY_FIELDS),
        users=read_csv_rows(base / USER_FILE, USER_FIELDS),
        access_logs=read_csv_rows(base / ACCESS_LOG_FILE, ACCESS_LOG_FIELDS),
    )
