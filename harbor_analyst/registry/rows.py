"""Typed rows of the four Harbor export record sets.

Every field is kept as the raw export string; the builder converts ids and
timestamps so it can report the offending row when a value is malformed.
Only the fields the registry uses are required.
"""

from __future__ import annotations

import msgspec


class ProjectRow(msgspec.Struct, kw_only=True, frozen=True):
    """Row of ``project.csv``."""

    project_id: str
    name: str
    owner_id: str = ""
    deleted: str = ""
    public: str = ""


class RepositoryRow(msgspec.Struct, kw_only=True, frozen=True):
    """Row of ``repository.csv``."""

    repository_id: str
    name: str
    project_id: str
    owner_id: str = ""


class UserRow(msgspec.Struct, kw_only=True, frozen=True):
    """Row of ``user.csv``."""

    user_id: str
    username: str


class AccessLogRow(msgspec.Struct, kw_only=True, frozen=True):
    """Row of ``access_log.csv``.

    Attributes
    ----------
    log_id
        Access-log id.
    user_id
        Id of the acting user.
    project_id
        Project the operation touched; used by ``create`` rows.
    repo_name
        Repository name; used by ``pull`` and ``push`` rows.
    repo_tag
        Tag name, or ``N/A`` for rows that do not concern a tag.
    operation
        One of ``create``, ``delete``, ``pull`` or ``push``.
    op_time
        Timestamp in ``YYYY-MM-DD HH:MM:SS`` form.

    """

    log_id: str
    user_id: str
    project_id: str
    repo_name: str
    repo_tag: str
    operation: str
    op_time: str


# Column order of each export file, as written by the Harbor database dump.
PROJECT_FIELDS = ("project_id", "owner_id", "name", "deleted", "public")
REPOSITORY_FIELDS = ("repository_id", "name", "project_id", "owner_id")
USER_FIELDS = ("user_id", "username")
ACCESS_LOG_FIELDS = (
    "log_id",
    "user_id",
    "project_id",
    "repo_name",
    "repo_tag",
    "operation",
    "op_time",
)
