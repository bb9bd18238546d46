"""In-memory model of a Harbor registry.

The graph is rooted at :class:`Registry`, which owns projects by id. Each
:class:`Project` owns its repositories by name, each :class:`Repository` owns
its tags by name and each :class:`Tag` files its pull and push logs by log id.

Looking at the image name ``registry.example.com/coreapp/base:0.2.1`` the
project is ``coreapp``, the repository is ``base`` and the tag is ``0.2.1``.
"""

from __future__ import annotations

import dataclasses
import enum
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    import datetime as dt


class LogKind(enum.StrEnum):
    """Operation recorded by a :class:`Log`."""

    PULL = "pull"
    PUSH = "push"


@dataclasses.dataclass(frozen=True, slots=True)
class User:
    """Registry user, identified by id."""

    id: int
    name: str


@dataclasses.dataclass(frozen=True, slots=True)
class Log:
    """A pull or push of a tag.

    Attributes
    ----------
    id
        Access-log id from the export; unique per operation.
    timestamp
        Naive timestamp of the operation.
    user
        The acting user, or ``None`` when the export references a user id
        that is not present in the user table.
    kind
        Whether the log records a pull or a push.

    """

    id: int
    timestamp: dt.datetime
    user: User | None
    kind: LogKind


@dataclasses.dataclass(slots=True)
class Tag:
    """Named image version inside a repository."""

    name: str
    pulls: dict[int, Log] = dataclasses.field(default_factory=dict)
    pushes: dict[int, Log] = dataclasses.field(default_factory=dict)

    def record(self, log: Log) -> None:
        """File ``log`` under pulls or pushes; a repeated id replaces the entry."""
        if log.kind is LogKind.PUSH:
            self.pushes[log.id] = log
        else:
            self.pulls[log.id] = log


@dataclasses.dataclass(slots=True)
class Repository:
    """Image repository. Names are unique across the whole registry."""

    id: int
    name: str
    tags: dict[str, Tag] = dataclasses.field(default_factory=dict)

    def tag(self, name: str) -> Tag:
        """Return the tag called ``name``, creating it on first use."""
        existing = self.tags.get(name)
        if existing is None:
            existing = Tag(name=name)
            self.tags[name] = existing
        return existing

    def iter_pushes(self) -> cabc.Iterator[Log]:
        """Yield every push to any tag of the repository."""
        for tag in self.tags.values():
            yield from tag.pushes.values()


@dataclasses.dataclass(slots=True)
class Project:
    """Harbor project owning a set of repositories.

    ``creation_date`` and ``creator`` stay ``None`` unless the access log
    contains a ``create`` operation for the project. The creation date is kept
    as the raw export string.
    """

    id: int
    name: str
    creation_date: str | None = None
    creator: User | None = None
    repositories: dict[str, Repository] = dataclasses.field(default_factory=dict)


@dataclasses.dataclass(slots=True)
class Registry:
    """Root of the registry graph: all projects keyed by id."""

    projects: dict[int, Project] = dataclasses.field(default_factory=dict)

    def iter_repositories(self) -> cabc.Iterator[Repository]:
        """Yield every repository of every project."""
        for project in self.projects.values():
            yield from project.repositories.values()

    def iter_pushes(self) -> cabc.Iterator[tuple[Repository, Log]]:
        """Yield ``(repository, push)`` pairs across the registry."""
        for repository in self.iter_repositories():
            for push in repository.iter_pushes():
                yield repository, push

    def iter_pulls(self) -> cabc.Iterator[tuple[Repository, Log]]:
        """Yield ``(repository, pull)`` pairs across the registry."""
        for repository in self.iter_repositories():
            for tag in repository.tags.values():
                for pull in tag.pulls.values():
                    yield repository, pull
