"""Plain-text rendering of an Aggregate."""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Tuple

from .durations import format_duration

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .aggregate import Aggregate

NO_DATA = "no data"


def aggregate_rows(agg: "Aggregate") -> List[Tuple[str, int]]:
    return [
        ("min:", agg.min),
        ("median:", agg.median),
        ("max:", agg.max),
        ("95th percentile:", agg.p95),
        ("99th percentile:", agg.p99),
    ]


def format_aggregate(agg: Optional["Aggregate"], padding: int = 1) -> str:
    """Two-column table, one line per statistic; ``"no data"`` for None.

    Values start at a common column: the widest label plus ``padding`` spaces.
    """
    if agg is None:
        return NO_DATA
    rows = aggregate_rows(agg)
    width = max(len(label) for label, _ in rows) + max(1, padding)
    return "".join(f"{label.ljust(width)}{format_duration(value)}\n" for label, value in rows)


__all__ = ["NO_DATA", "aggregate_rows", "format_aggregate"]
