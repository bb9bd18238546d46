"""Errors raised while writing report artefacts."""

from __future__ import annotations

from pathlib import Path  # noqa: TC003


class ReportOutputError(Exception):
    """Raised when a chart image or the PDF report cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        """Initialise with the artefact path and the failure reason."""
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write {path}: {reason}")
