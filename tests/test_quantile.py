import random

import pytest

from latstat.durations import MILLISECOND
from latstat.quantiles import QuantileResult, estimate_quantile, quantile_of_sorted


def ms(*values):
    return [v * MILLISECOND for v in values]


def test_quantile_basic():
    data = ms(30, 10, 50, 20, 40)
    assert estimate_quantile(list(data), 0, 2) == QuantileResult(10 * MILLISECOND, True)
    assert estimate_quantile(list(data), 1, 2) == QuantileResult(30 * MILLISECOND, True)
    assert estimate_quantile(list(data), 2, 2) == QuantileResult(50 * MILLISECOND, True)


def test_quantile_interpolates_between_neighbours():
    # i = 0.95 * 4 = 3.8 -> 0.2 * 40ms + 0.8 * 50ms
    value, ok = estimate_quantile(ms(10, 20, 30, 40, 50), 95, 100)
    assert ok
    assert value == 48 * MILLISECOND


def test_quantile_truncates_toward_zero():
    # 0.5 * (1 + 2) = 1.5ns -> 1ns, never rounded up
    assert estimate_quantile([1, 2], 1, 2) == (1, True)
    # i = 2/3 * 1; 1/3 * 0 + 2/3 * 10 = 6.67 -> 6
    assert estimate_quantile([0, 10], 2, 3) == (6, True)


def test_quantile_p99_of_five_samples():
    value, ok = estimate_quantile(ms(10, 20, 30, 40, 50), 99, 100)
    assert ok
    assert value == 49_600_000


def test_quantile_singleton():
    for k in range(0, 101):
        assert estimate_quantile([42], k, 100) == (42, True)


def test_quantile_constant_sequence():
    data = [7] * 200
    for k in (1, 50, 95, 99):
        assert estimate_quantile(data, k, 100) == (7, True)


@pytest.mark.parametrize(
    "samples,k,q",
    [
        ([], 1, 2),
        ([1, 2, 3], 3, 2),
        ([1, 2, 3], 1, 0),
        ([1, 2, 3], -1, 2),
        ([1, 2, 3], 0, 0),
    ],
)
def test_quantile_invalid_parameters(samples, k, q):
    result = estimate_quantile(samples, k, q)
    assert result == QuantileResult(0, False)
    assert not result.ok


def test_invalid_query_does_not_sort():
    data = [3, 1, 2]
    estimate_quantile(data, 3, 2)
    assert data == [3, 1, 2]


def test_quantile_sorts_in_place():
    data = [5, 3, 9, 1]
    estimate_quantile(data, 1, 2)
    assert data == [1, 3, 5, 9]
    # Idempotent on the already-sorted list
    first = estimate_quantile(data, 95, 100)
    assert estimate_quantile(data, 95, 100) == first
    assert data == [1, 3, 5, 9]


def test_quantile_of_sorted_leaves_input_alone():
    data = (1, 2, 3, 4)
    assert quantile_of_sorted(data, 1, 2) == (2, True)  # 1.5 truncated
    assert quantile_of_sorted((), 1, 2) == (0, False)


def test_min_and_max_for_any_q():
    rng = random.Random(3)
    data = [rng.randrange(0, 10**9) for _ in range(257)]
    for q in (1, 2, 3, 10, 100, 1000):
        assert estimate_quantile(list(data), 0, q) == (min(data), True)
        assert estimate_quantile(list(data), q, q) == (max(data), True)


def test_monotonic_in_k():
    rng = random.Random(4)
    data = [rng.randrange(0, 10**7) for _ in range(101)]
    for q in (2, 7, 100):
        values = [estimate_quantile(data, k, q).value for k in range(q + 1)]
        assert values == sorted(values)


def test_permutation_invariance():
    rng = random.Random(5)
    data = [rng.randrange(0, 10**6) for _ in range(64)]
    expected = [estimate_quantile(list(data), k, 100).value for k in (0, 25, 50, 95, 99, 100)]
    for _ in range(10):
        shuffled = list(data)
        rng.shuffle(shuffled)
        got = [estimate_quantile(shuffled, k, 100).value for k in (0, 25, 50, 95, 99, 100)]
        assert got == expected


def test_equal_neighbours_beyond_float_precision():
    # 2**53 + 1 has no exact float; the raw blend lands on 2**53, below both neighbours
    big = 2**53 + 1
    assert int(0.5 * big + 0.5 * big) == 2**53
    assert quantile_of_sorted([big, big], 1, 2) == (big, True)
    assert estimate_quantile([big, big, big], 99, 100) == (big, True)
