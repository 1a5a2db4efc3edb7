from latstat.aggregate import Aggregate, build_aggregate
from latstat.durations import MICROSECOND, MILLISECOND, SECOND
from latstat.report import format_aggregate


def test_no_data_sentinel():
    assert format_aggregate(None) == "no data"


def test_five_samples_table():
    agg = build_aggregate([v * MILLISECOND for v in (10, 20, 30, 40, 50)])
    assert format_aggregate(agg) == (
        "min:             10ms\n"
        "median:          30ms\n"
        "max:             50ms\n"
        "95th percentile: 48ms\n"
        "99th percentile: 49.6ms\n"
    )


def test_values_share_a_column():
    agg = Aggregate(min=500, median=1500 * MICROSECOND, max=90 * SECOND, p95=2 * SECOND, p99=61 * SECOND)
    lines = format_aggregate(agg).splitlines()
    assert [line.split(":")[0] for line in lines] == ["min", "median", "max", "95th percentile", "99th percentile"]
    starts = {len(line) - len(line.split()[-1]) for line in lines}
    assert starts == {17}
    assert lines[0].endswith("500ns")
    assert lines[1].endswith("1.5ms")
    assert lines[2].endswith("1m30s")
    assert lines[4].endswith("1m1s")


def test_padding_widens_gap():
    agg = Aggregate(1, 1, 1, 1, 1)
    lines = format_aggregate(agg, padding=3).splitlines()
    assert lines[3] == "95th percentile:   1ns"
