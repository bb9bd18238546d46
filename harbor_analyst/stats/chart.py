"""Chart-data contract shared by every statistic.

A statistic is *bar chartable* when it can list its bars in display order and
carries a title that is set exactly once before anything reads it. Renderers
depend only on :class:`BarChartable`, so new statistics plug into the report
without renderer changes.
"""

from __future__ import annotations

import typing as typ

import msgspec

from harbor_analyst.stats.errors import InvariantViolation

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class BarChartValue(msgspec.Struct, frozen=True):
    """A single labelled bar."""

    label: str
    value: int


@typ.runtime_checkable
class BarChartable(typ.Protocol):
    """Capability surface consumed by chart and report renderers."""

    def ordered_bar_chart_values(self) -> tuple[BarChartValue, ...]:
        """Return the bars in display order."""
        ...

    def set_title(self, title: str) -> None:
        """Set the human-readable title; allowed once."""
        ...

    @property
    def title(self) -> str:
        """Return the title, failing if it was never set."""
        ...


class ChartSeries[EntryT]:
    """Ordered statistic entries plus a write-once title.

    Subclasses describe how an entry becomes a bar by implementing
    :meth:`_bar_for`. Entries are kept in the order given, which is the
    statistic's own sort order.
    """

    __slots__ = ("_entries", "_title")

    def __init__(self, entries: cabc.Iterable[EntryT] = ()) -> None:
        """Store ``entries`` in order with no title."""
        self._entries: tuple[EntryT, ...] = tuple(entries)
        self._title = ""

    def __len__(self) -> int:
        """Return the number of entries."""
        return len(self._entries)

    def __repr__(self) -> str:
        """Return a debugging representation that does not require a title."""
        return (
            f"{type(self).__name__}(entries={len(self._entries)}, "
            f"title={self._title!r})"
        )

    @property
    def entries(self) -> tuple[EntryT, ...]:
        """Return the typed entries in display order."""
        return self._entries

    def _bar_for(self, entry: EntryT) -> BarChartValue:
        raise NotImplementedError

    def ordered_bar_chart_values(self) -> tuple[BarChartValue, ...]:
        """Return one bar per entry, preserving entry order."""
        return tuple(self._bar_for(entry) for entry in self._entries)

    def set_title(self, title: str) -> None:
        """Set the chart title.

        Raises
        ------
        InvariantViolation
            If the title is blank or has already been set.

        """
        if not title.strip():
            msg = f"{type(self).__name__} title must not be empty"
            raise InvariantViolation(msg)
        if self._title:
            msg = (
                f"{type(self).__name__} title is already set to {self._title!r}; "
                f"refusing {title!r}"
            )
            raise InvariantViolation(msg)
        self._title = title

    @property
    def title(self) -> str:
        """Return the chart title.

        Raises
        ------
        InvariantViolation
            If :meth:`set_title` has not been called.

        """
        if not self._title:
            msg = f"title of {self!r} was read before it was set"
            raise InvariantViolation(msg)
        return self._title

    @property
    def has_title(self) -> bool:
        """Return whether a title has been set."""
        return bool(self._title)
