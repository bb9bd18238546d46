"""Unit tests for the in-memory registry graph."""

from __future__ import annotations

import datetime as dt

from harbor_analyst.registry import Log, LogKind, Project, Registry, Repository, User


def _log(log_id: int, kind: LogKind, hour: int = 8) -> Log:
    return Log(
        id=log_id,
        timestamp=dt.datetime(2024, 1, 2, hour, 0),
        user=User(id=1, name="alice"),
        kind=kind,
    )


class TestRepository:
    """Tag bookkeeping on a repository."""

    def test_tag_is_created_once(self) -> None:
        """Asking for the same tag twice returns the same object."""
        repository = Repository(id=1, name="demo/app")

        first = repository.tag("1.0")
        second = repository.tag("1.0")

        assert first is second
        assert list(repository.tags) == ["1.0"]

    def test_iter_pushes_spans_tags_and_ignores_pulls(self) -> None:
        """Pushes from every tag are yielded; pulls are not."""
        repository = Repository(id=1, name="demo/app")
        repository.tag("1.0").record(_log(1, LogKind.PUSH))
        repository.tag("2.0").record(_log(2, LogKind.PUSH))
        repository.tag("2.0").record(_log(3, LogKind.PULL))

        assert sorted(log.id for log in repository.iter_pushes()) == [1, 2]


class TestRegistry:
    """Traversal helpers on the registry root."""

    def test_iter_pushes_and_pulls_pair_logs_with_repository(self) -> None:
        """Each log is yielded together with the repository it belongs to."""
        app = Repository(id=1, name="demo/app")
        web = Repository(id=2, name="demo/web")
        app.tag("latest").record(_log(1, LogKind.PUSH))
        web.tag("latest").record(_log(2, LogKind.PULL))
        registry = Registry(
            projects={
                1: Project(
                    id=1, name="demo", repositories={app.name: app, web.name: web}
                )
            }
        )

        assert [(repo.name, log.id) for repo, log in registry.iter_pushes()] == [
            ("demo/app", 1)
        ]
        assert [(repo.name, log.id) for repo, log in registry.iter_pulls()] == [
            ("demo/web", 2)
        ]
        assert [repo.name for repo in registry.iter_repositories()] == [
            "demo/app",
            "demo/web",
        ]
