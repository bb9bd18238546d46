"""Errors raised or collected while building the registry graph."""

from __future__ import annotations

import enum


class RecordSet(enum.StrEnum):
    """The four record sets of a Harbor export."""

    PROJECT = "project"
    REPOSITORY = "repository"
    USER = "user"
    ACCESS_LOG = "access_log"


class RegistryError(Exception):
    """Base class for registry build errors and warnings."""


class MalformedRecord(RegistryError):
    """Raised when a row cannot be turned into part of the registry.

    A missing field, a non-numeric id, an unparseable timestamp or a
    structural conflict (an unknown owning project, a duplicate repository
    name) all abort the build.

    Attributes
    ----------
    record_set
        Record set the row belongs to.
    row_number
        One-based position of the row within its record set.
    field
        Offending field name, if a single field is at fault.
    reason
        Human-readable description of the problem.

    """

    def __init__(
        self,
        record_set: RecordSet,
        row_number: int,
        reason: str,
        *,
        field: str | None = None,
    ) -> None:
        """Initialise with the offending row and reason."""
        self.record_set = record_set
        self.row_number = row_number
        self.field = field
        self.reason = reason
        location = f"{record_set} row {row_number}"
        if field is not None:
            location = f"{location} field {field!r}"
        super().__init__(f"Malformed {location}: {reason}")

    @classmethod
    def not_an_integer(
        cls, record_set: RecordSet, row_number: int, field: str, value: str
    ) -> MalformedRecord:
        """Build the error for an id field that is not a decimal integer."""
        return cls(
            record_set, row_number, f"expected an integer, got {value!r}", field=field
        )

    @classmethod
    def bad_timestamp(
        cls, record_set: RecordSet, row_number: int, field: str, value: str
    ) -> MalformedRecord:
        """Build the error for an unparseable timestamp."""
        return cls(
            record_set,
            row_number,
            f"expected a 'YYYY-MM-DD HH:MM:SS' timestamp, got {value!r}",
            field=field,
        )


class ReferenceKind(enum.StrEnum):
    """Kinds of entity an access-log row may fail to resolve."""

    PROJECT = "project"
    REPOSITORY = "repository"
    USER = "user"


class UnresolvedReference(RegistryError):
    """An access-log row references an entity that does not exist.

    Never raised by the builder: instances are collected as warnings and the
    build continues.
    """

    def __init__(self, row_number: int, kind: ReferenceKind, key: object) -> None:
        """Initialise with the access-log row and the missing reference."""
        self.row_number = row_number
        self.kind = kind
        self.key = key
        super().__init__(
            f"access_log row {row_number} references unknown {kind} {key!r}"
        )


class IgnoredRecord(RegistryError):
    """An access-log row that the registry does not model.

    Collected as a warning; covers ``delete`` operations, rows without a tag
    and unknown operation names.
    """

    def __init__(self, row_number: int, reason: str) -> None:
        """Initialise with the access-log row and why it was skipped."""
        self.row_number = row_number
        self.reason = reason
        super().__init__(f"access_log row {row_number} skipped: {reason}")


type BuildWarning = UnresolvedReference | IgnoredRecord
