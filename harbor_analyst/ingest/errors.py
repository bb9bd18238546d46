"""Errors raised while reading a Harbor export snapshot."""

from __future__ import annotations

from pathlib import Path  # noqa: TC003


class SnapshotError(Exception):
    """Raised when a snapshot file cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        """Initialise with the unreadable file and the reason."""
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read snapshot file {path}: {reason}")
