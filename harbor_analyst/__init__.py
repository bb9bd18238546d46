"""Usage analytics for Harbor container registries.

harbor-analyst reads CSV exports of a Harbor registry database, rebuilds the
project/repository/tag graph in memory, computes push statistics and renders
them into a PDF report of bar charts.

Example:
>>> from harbor_analyst.ingest import load_snapshot
>>> from harbor_analyst.registry import build_registry
>>> snapshot = load_snapshot("raw")
>>> result = build_registry(*snapshot.record_sets())

"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
