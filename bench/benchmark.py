"""Simple benchmarking harness for latstat.

Times ``build_aggregate`` over synthetic sample sets and reports the per-call
latencies with latstat's own summary, plus approximate memory use. Keeps
dependencies minimal; for deeper profiling integrate with py-spy or scalene
externally.
"""
from __future__ import annotations

import argparse
import random
import time
import tracemalloc
from typing import List

from latstat.aggregate import build_aggregate
from latstat.durations import MILLISECOND
from latstat.report import format_aggregate


def synthetic_samples(n: int, seed: int = 0) -> List[int]:
    """Log-normal-ish latencies around 20ms with a slow tail."""
    rng = random.Random(seed)
    out = []
    for _ in range(n):
        base = rng.lognormvariate(0, 0.5) * 20 * MILLISECOND
        if rng.random() < 0.01:
            base *= 10
        out.append(int(base))
    return out


def run(samples: List[int], warm: int, measure: int) -> None:
    # Warm phase (ignore timing)
    for _ in range(warm):
        build_aggregate(samples)

    timings: List[int] = []
    tracemalloc.start()
    start = time.perf_counter()
    for _ in range(measure):
        t0 = time.perf_counter_ns()
        build_aggregate(samples)
        timings.append(time.perf_counter_ns() - t0)
    elapsed = time.perf_counter() - start
    current, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    cps = measure / elapsed if elapsed else float("inf")
    print(f"Aggregated {measure} sets of {len(samples)} samples in {elapsed:.3f}s -> {cps:,.0f} sets/sec")
    print(f"Current mem ~{current/1024/1024:.2f} MB; Peak mem ~{peak/1024/1024:.2f} MB")
    print("Per-call latency:")
    print(format_aggregate(build_aggregate(timings)).rstrip("\n"))


def main() -> int:
    ap = argparse.ArgumentParser(description="Benchmark latstat aggregation throughput")
    ap.add_argument("--samples", type=int, default=10000, help="Samples per synthetic set")
    ap.add_argument("--warm", type=int, default=20, help="Warm-up calls (not timed)")
    ap.add_argument("--measure", type=int, default=200, help="Calls to measure")
    ap.add_argument("--seed", type=int, default=0)
    args = ap.parse_args()
    run(synthetic_samples(args.samples, args.seed), args.warm, args.measure)
    return 0


if __name__ == "__main__":  # pragma: no cover - manual use
    raise SystemExit(main())
