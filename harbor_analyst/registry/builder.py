"""Build the registry graph from the flat Harbor export record sets.

The builder resolves the foreign keys between the four record sets and files
every pull and push under its tag. Rows that cannot be interpreted abort the
build with :class:`MalformedRecord`; rows that reference missing entities are
skipped (or, for unknown users, kept without a user) and reported as warnings
on the returned :class:`BuildResult`. The builder itself never logs.

Usage
-----
>>> result = build_registry(projects, repositories, users, access_logs)
>>> for warning in result.warnings:
...     print(warning)

"""

from __future__ import annotations

import dataclasses
import typing as typ

import msgspec

from harbor_analyst.common.time import parse_timestamp
from harbor_analyst.registry.errors import (
    BuildWarning,
    IgnoredRecord,
    MalformedRecord,
    RecordSet,
    ReferenceKind,
    UnresolvedReference,
)
from harbor_analyst.registry.models import (
    Log,
    LogKind,
    Project,
    Registry,
    Repository,
    User,
)
from harbor_analyst.registry.rows import (
    AccessLogRow,
    ProjectRow,
    RepositoryRow,
    UserRow,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    import datetime as dt

type Row = cabc.Mapping[str, str]

CREATE_OPERATION = "create"
DELETE_OPERATION = "delete"
NO_TAG = "N/A"

_LOG_KINDS = {"pull": LogKind.PULL, "push": LogKind.PUSH}


@dataclasses.dataclass(frozen=True, slots=True)
class BuildResult:
    """Outcome of a successful build.

    Attributes
    ----------
    registry
        The fully linked registry graph.
    warnings
        Recoverable problems met while reading the access log, in row order.

    """

    registry: Registry
    warnings: tuple[BuildWarning, ...] = ()


@dataclasses.dataclass(slots=True)
class _BuildState:
    """Indexes shared by the build steps."""

    projects: dict[int, Project] = dataclasses.field(default_factory=dict)
    repositories: dict[str, Repository] = dataclasses.field(default_factory=dict)
    users: dict[int, User] = dataclasses.field(default_factory=dict)
    warnings: list[BuildWarning] = dataclasses.field(default_factory=list)


def _convert[RowT: msgspec.Struct](
    row: Row, row_type: type[RowT], record_set: RecordSet, row_number: int
) -> RowT:
    try:
        return msgspec.convert(dict(row), type=row_type)
    except msgspec.ValidationError as exc:
        raise MalformedRecord(record_set, row_number, str(exc)) from exc


def _parse_int(value: str, record_set: RecordSet, row_number: int, field: str) -> int:
    digits = value.strip()
    # int() also takes "+5", "1_0" and non-ASCII digits.
    if not (digits.isascii() and digits.removeprefix("-").isdigit()):
        raise MalformedRecord.not_an_integer(record_set, row_number, field, value)
    return int(digits)


def _parse_time(
    value: str, record_set: RecordSet, row_number: int, field: str
) -> dt.datetime:
    try:
        return parse_timestamp(value)
    except ValueError as exc:
        raise MalformedRecord.bad_timestamp(record_set, row_number, field, value) from exc


def _add_projects(rows: cabc.Iterable[Row], state: _BuildState) -> None:
    for row_number, raw in enumerate(rows, start=1):
        row = _convert(raw, ProjectRow, RecordSet.PROJECT, row_number)
        project_id = _parse_int(
            row.project_id, RecordSet.PROJECT, row_number, "project_id"
        )
        state.projects[project_id] = Project(id=project_id, name=row.name)


def _add_repositories(rows: cabc.Iterable[Row], state: _BuildState) -> None:
    for row_number, raw in enumerate(rows, start=1):
        row = _convert(raw, RepositoryRow, RecordSet.REPOSITORY, row_number)
        repository_id = _parse_int(
            row.repository_id, RecordSet.REPOSITORY, row_number, "repository_id"
        )
        project_id = _parse_int(
            row.project_id, RecordSet.REPOSITORY, row_number, "project_id"
        )

        project = state.projects.get(project_id)
        if project is None:
            raise MalformedRecord(
                RecordSet.REPOSITORY,
                row_number,
                f"repository {row.name!r} belongs to unknown project {project_id}",
                field="project_id",
            )
        if row.name in state.repositories:
            raise MalformedRecord(
                RecordSet.REPOSITORY,
                row_number,
                f"repository name {row.name!r} is already used; access logs "
                "reference repositories by name only",
                field="name",
            )

        repository = Repository(id=repository_id, name=row.name)
        state.repositories[row.name] = repository
        project.repositories[row.name] = repository


def _add_users(rows: cabc.Iterable[Row], state: _BuildState) -> None:
    for row_number, raw in enumerate(rows, start=1):
        row = _convert(raw, UserRow, RecordSet.USER, row_number)
        user_id = _parse_int(row.user_id, RecordSet.USER, row_number, "user_id")
        state.users[user_id] = User(id=user_id, name=row.username)


def _resolve_user(user_id: int, row_number: int, state: _BuildState) -> User | None:
    user = state.users.get(user_id)
    if user is None:
        state.warnings.append(
            UnresolvedReference(row_number, ReferenceKind.USER, user_id)
        )
    return user


def _apply_create(row: AccessLogRow, row_number: int, state: _BuildState) -> None:
    user_id = _parse_int(row.user_id, RecordSet.ACCESS_LOG, row_number, "user_id")
    project_id = _parse_int(
        row.project_id, RecordSet.ACCESS_LOG, row_number, "project_id"
    )
    _parse_time(row.op_time, RecordSet.ACCESS_LOG, row_number, "op_time")

    creator = _resolve_user(user_id, row_number, state)
    project = state.projects.get(project_id)
    if project is None:
        state.warnings.append(
            UnresolvedReference(row_number, ReferenceKind.PROJECT, project_id)
        )
        return

    project.creation_date = row.op_time
    project.creator = creator


def _apply_tag_operation(
    row: AccessLogRow, kind: LogKind, row_number: int, state: _BuildState
) -> None:
    user_id = _parse_int(row.user_id, RecordSet.ACCESS_LOG, row_number, "user_id")
    log_id = _parse_int(row.log_id, RecordSet.ACCESS_LOG, row_number, "log_id")
    timestamp = _parse_time(row.op_time, RecordSet.ACCESS_LOG, row_number, "op_time")

    repository = state.repositories.get(row.repo_name)
    if repository is None:
        state.warnings.append(
            UnresolvedReference(row_number, ReferenceKind.REPOSITORY, row.repo_name)
        )
        return

    user = _resolve_user(user_id, row_number, state)
    repository.tag(row.repo_tag).record(
        Log(id=log_id, timestamp=timestamp, user=user, kind=kind)
    )


def _apply_access_log(rows: cabc.Iterable[Row], state: _BuildState) -> None:
    for row_number, raw in enumerate(rows, start=1):
        row = _convert(raw, AccessLogRow, RecordSet.ACCESS_LOG, row_number)
        operation = row.operation.strip()

        if operation == CREATE_OPERATION:
            _apply_create(row, row_number, state)
            continue

        if row.repo_tag == NO_TAG:
            state.warnings.append(
                IgnoredRecord(row_number, f"{operation!r} operation without a tag")
            )
            continue

        if operation == DELETE_OPERATION:
            state.warnings.append(
                IgnoredRecord(row_number, "delete operations are not modelled")
            )
            continue

        kind = _LOG_KINDS.get(operation)
        if kind is None:
            state.warnings.append(
                IgnoredRecord(row_number, f"unknown operation {operation!r}")
            )
            continue

        _apply_tag_operation(row, kind, row_number, state)


def build_registry(
    project_rows: cabc.Iterable[Row],
    repository_rows: cabc.Iterable[Row],
    user_rows: cabc.Iterable[Row],
    access_log_rows: cabc.Iterable[Row],
) -> BuildResult:
    """Link the four export record sets into a :class:`Registry`.

    Parameters
    ----------
    project_rows
        Rows of ``project.csv`` keyed by field name.
    repository_rows
        Rows of ``repository.csv``.
    user_rows
        Rows of ``user.csv``.
    access_log_rows
        Rows of ``access_log.csv``.

    Returns
    -------
    BuildResult
        The registry plus the recoverable warnings collected on the way.

    Raises
    ------
    MalformedRecord
        If any row is missing a field, carries a non-numeric id or an
        unparseable timestamp, places a repository in an unknown project or
        reuses a repository name. Nothing is returned in that case.

    """
    state = _BuildState()
    _add_projects(project_rows, state)
    _add_repositories(repository_rows, state)
    _add_users(user_rows, state)
    _apply_access_log(access_log_rows, state)
    return BuildResult(
        registry=Registry(projects=state.projects),
        warnings=tuple(state.warnings),
    )
