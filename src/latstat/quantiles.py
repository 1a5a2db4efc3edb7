"""Interpolated quantiles over duration samples.

``estimate_quantile`` returns the value at the k-th of q quantiles using linear
interpolation between the two order statistics that bracket the fraction k/q.
The interpolation is done in floating point and the result is truncated toward
zero back to an integer nanosecond count, so reported percentiles never round
up to a value that was not observed.

Invalid queries are reported through ``QuantileResult.ok`` rather than raised:

    >>> estimate_quantile([3, 1, 2], 1, 2)
    QuantileResult(value=2, ok=True)
    >>> estimate_quantile([], 1, 2)
    QuantileResult(value=0, ok=False)
"""

from __future__ import annotations

import math
from typing import List, NamedTuple, Sequence


class QuantileResult(NamedTuple):
    value: int
    ok: bool


_FAILED = QuantileResult(0, False)


def _valid_query(n: int, k: int, q: int) -> bool:
    return n >= 1 and 0 <= k <= q and q >= 1


def quantile_of_sorted(data: Sequence[int], k: int, q: int) -> QuantileResult:
    """Quantile of an already ascending sequence. Does not sort or mutate ``data``."""
    n = len(data)
    if not _valid_query(n, k, q):
        return _FAILED
    if k == 0:
        return QuantileResult(data[0], True)
    if k == q:
        return QuantileResult(data[-1], True)

    bucket_size = float(n - 1) / float(q)
    i = float(k) * bucket_size

    lower = math.trunc(i)
    if i > lower and lower + 1 < n:
        # quantile lies between two elements
        upper = lower + 1
    else:
        upper = lower
    weight_upper = i - lower
    weight_lower = 1 - weight_upper
    value = int(weight_lower * data[lower] + weight_upper * data[upper])
    # float error must not push the result outside its bracket
    return QuantileResult(max(data[lower], min(value, data[upper])), True)


def estimate_quantile(samples: List[int], k: int, q: int) -> QuantileResult:
    """Return the k-th of q quantiles of ``samples``.

    ``samples`` is sorted ascending in place; callers that need the original
    order must pass a copy. Sorting an already sorted list is harmless, so
    repeated calls on the same list give consistent answers.

    Returns ``QuantileResult(0, False)`` when ``samples`` is empty, ``k > q``,
    ``k < 0`` or ``q < 1``.
    """
    if not _valid_query(len(samples), k, q):
        return _FAILED
    samples.sort()
    return quantile_of_sorted(samples, k, q)


__all__ = ["QuantileResult", "estimate_quantile", "quantile_of_sorted"]
