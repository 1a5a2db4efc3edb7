"""Five-number latency summary built from a sample set."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .logutil import get_logger
from .quantiles import quantile_of_sorted

# (field, k, q) in evaluation order
_QUERIES = (
    ("min", 0, 2),
    ("median", 1, 2),
    ("max", 2, 2),
    ("p95", 95, 100),
    ("p99", 99, 100),
)


@dataclass(frozen=True)
class Aggregate:
    min: int
    median: int
    max: int
    p95: int  # 95th percentile
    p99: int  # 99th percentile

    def __post_init__(self) -> None:
        if not (self.min <= self.median <= self.p95 <= self.p99 <= self.max):
            raise ValueError(
                "aggregate fields must satisfy min <= median <= p95 <= p99 <= max, got "
                f"min={self.min} median={self.median} p95={self.p95} p99={self.p99} max={self.max}"
            )

    def __str__(self) -> str:
        from .report import format_aggregate

        return format_aggregate(self)


def build_aggregate(samples: Iterable[int]) -> Optional[Aggregate]:
    """Summarize ``samples`` or return None when there is nothing to summarize.

    The input is copied and sorted once; the caller's sequence is left untouched.
    """
    data = sorted(samples)
    if not data:
        return None
    fields = {}
    for name, k, q in _QUERIES:
        value, ok = quantile_of_sorted(data, k, q)
        if not ok:
            get_logger().warning("quantile %d/%d failed over %d samples; no aggregate", k, q, len(data))
            return None
        fields[name] = value
    return Aggregate(**fields)


__all__ = ["Aggregate", "build_aggregate"]
