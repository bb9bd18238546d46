"""Errors raised while loading and binding analyst configuration."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when analyst configuration cannot be loaded or applied.

    Attributes
    ----------
    issues
        One message per problem found.

    """

    def __init__(self, issues: list[str]) -> None:
        """Capture the issues and join them into the exception message."""
        super().__init__("\n".join(issues))
        self.issues = issues

    @classmethod
    def for_chart(cls, index: int, issue: str) -> ConfigurationError:
        """Build an error for the chart at position ``index`` (zero-based)."""
        return cls([f"charts[{index}]: {issue}"])
