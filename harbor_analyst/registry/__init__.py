"""In-memory Harbor registry graph and the builder that links it.

The registry is rebuilt from four flat record sets on every run:

- ``project`` rows become :class:`Project` entities keyed by id,
- ``repository`` rows become :class:`Repository` entities placed in their
  owning project and indexed globally by name,
- ``user`` rows become :class:`User` entities keyed by id,
- ``access_log`` rows become pull and push :class:`Log` entries filed under
  their :class:`Tag`, or set a project's creation details.

Usage
-----
Build a registry and inspect the warnings::

    from harbor_analyst.registry import build_registry

    result = build_registry(projects, repositories, users, access_logs)
    registry = result.registry
    for warning in result.warnings:
        print(warning)

"""

from harbor_analyst.registry.builder import BuildResult, build_registry
from harbor_analyst.registry.errors import (
    BuildWarning,
    IgnoredRecord,
    MalformedRecord,
    RecordSet,
    ReferenceKind,
    RegistryError,
    UnresolvedReference,
)
from harbor_analyst.registry.models import (
    Log,
    LogKind,
    Project,
    Registry,
    Repository,
    Tag,
    User,
)

__all__ = [
    "BuildResult",
    "BuildWarning",
    "IgnoredRecord",
    "Log",
    "LogKind",
    "MalformedRecord",
    "Project",
    "RecordSet",
    "ReferenceKind",
    "Registry",
    "RegistryError",
    "Repository",
    "Tag",
    "UnresolvedReference",
    "User",
    "build_registry",
]
