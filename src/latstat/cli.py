import argparse
import os
import sys
from typing import List, Optional

from rich.console import Console
from rich.text import Text

from . import __version__
from .aggregate import build_aggregate
from .config import UNIT_SCALE, SummaryConfig
from .durations import format_duration
from .logutil import set_verbose
from .quantiles import estimate_quantile
from .report import NO_DATA, aggregate_rows, format_aggregate
from .samples import SampleError, read_samples


def build_config(args: argparse.Namespace) -> SummaryConfig:
    cfg = SummaryConfig()
    unit = getattr(args, "unit", None)
    if unit is not None:
        if unit in UNIT_SCALE:
            cfg.unit = unit
        else:
            print(f"[latstat] unknown --unit '{unit}'; using {cfg.unit}", file=sys.stderr)
    cfg.strict = bool(getattr(args, "strict", False))
    if getattr(args, "comment_prefix", None) is not None:
        cfg.comment_prefix = args.comment_prefix
    if getattr(args, "padding", None) is not None:
        if args.padding >= 1:
            cfg.padding = args.padding
        else:
            print("[latstat] --padding must be >= 1; using default", file=sys.stderr)
    return cfg


def load_samples(paths: List[str], cfg: SummaryConfig) -> Optional[List[int]]:
    """Pool samples from every path; None (after reporting) on a fatal error."""
    samples: List[int] = []
    for path in paths:
        if path != "-" and not os.path.exists(path):
            print(f"[latstat] samples file not found: {path}", file=sys.stderr)
            return None
        try:
            samples.extend(read_samples(path, cfg))
        except SampleError as exc:
            print(f"[latstat] {exc}", file=sys.stderr)
            return None
        except OSError as exc:
            print(f"[latstat] cannot read samples file {path}: {exc.strerror or exc}", file=sys.stderr)
            return None
    return samples


def _maybe_console(args: argparse.Namespace) -> Optional[Console]:
    if getattr(args, "no_color", False):
        return None
    # force_terminal ensures ANSI codes even when output is being captured (for tests)
    return Console(color_system="truecolor", stderr=False, force_terminal=True, highlight=False)


def cmd_summarize(args: argparse.Namespace) -> int:
    cfg = build_config(args)
    samples = load_samples(args.files, cfg)
    if samples is None:
        return 2
    count = len(samples)
    agg = build_aggregate(samples)
    console = _maybe_console(args)
    if console is None:
        print(f"samples: {count}")
        print(format_aggregate(agg, padding=cfg.padding).rstrip("\n"))
        return 0

    console.print(Text(f"samples: {count}", style="dim"))
    if agg is None:
        console.print(Text(NO_DATA, style="yellow"))
        return 0
    rows = aggregate_rows(agg)
    width = max(len(label) for label, _ in rows) + cfg.padding
    for label, value in rows:
        text = Text()
        text.append(label.ljust(width), style="cyan")
        text.append(format_duration(value), style="bold magenta")
        console.print(text)
    return 0


def cmd_quantile(args: argparse.Namespace) -> int:
    cfg = build_config(args)
    samples = load_samples(args.files, cfg)
    if samples is None:
        return 2
    value, ok = estimate_quantile(samples, args.k, args.q)
    if not ok:
        if not samples:
            print(NO_DATA)
            return 0
        print(f"[latstat] invalid quantile {args.k}/{args.q} (need 0 <= k <= q and q >= 1)", file=sys.stderr)
        return 2
    print(format_duration(value))
    return 0


def _add_input_options(p: argparse.ArgumentParser) -> None:
    p.add_argument("files", nargs="+", help="Sample files, one duration per line ('-' reads stdin)")
    p.add_argument(
        "--unit",
        default="ms",
        help=f"Unit for bare numbers: {', '.join(UNIT_SCALE)} (default: ms)",
    )
    p.add_argument("--strict", action="store_true", help="Fail on the first malformed line instead of skipping it")
    p.add_argument("--comment-prefix", help="Skip lines starting with this prefix (default: '#')")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="latstat", description="Summarize latency samples: min, median, max, p95, p99.")
    # Global --version (argparse will exit 0 before validating subcommands)
    parser.add_argument(
        "--version",
        action="version",
        version=f"latstat {__version__}",
        help="Show version and exit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")
    sub = parser.add_subparsers(dest="cmd")

    summarize_parser = sub.add_parser("summarize", help="Print the latency summary of one or more sample files")
    _add_input_options(summarize_parser)
    summarize_parser.add_argument("--padding", type=int, help="Spaces between label and value columns (default: 1)")
    summarize_parser.add_argument("--no-color", action="store_true", help="Disable colorized output")
    summarize_parser.set_defaults(func=cmd_summarize)

    quantile_parser = sub.add_parser("quantile", help="Print the k-th of q quantiles of the samples")
    _add_input_options(quantile_parser)
    quantile_parser.add_argument("--k", type=int, required=True, help="Quantile index (0 <= k <= q)")
    quantile_parser.add_argument("--q", type=int, default=100, help="Number of quantiles (default: 100, i.e. percentiles)")
    quantile_parser.set_defaults(func=cmd_quantile)

    # Bench subcommand (lightweight wrapper around bench/benchmark.py)
    bench_parser = sub.add_parser("bench", help="Time aggregation over synthetic sample sets")
    bench_parser.add_argument("--samples", type=int, default=10000, help="Samples per synthetic set")
    bench_parser.add_argument("--warm", type=int, default=20, help="Warm-up calls (not timed)")
    bench_parser.add_argument("--measure", type=int, default=200, help="Calls to measure")
    bench_parser.add_argument("--seed", type=int, default=0)

    def _cmd_bench(a: argparse.Namespace) -> int:  # pragma: no cover - covered via integration test
        try:
            from bench.benchmark import run, synthetic_samples
        except ImportError as exc:
            print(f"[latstat] bench harness import failed: {exc}", file=sys.stderr)
            return 2
        run(synthetic_samples(a.samples, a.seed), a.warm, a.measure)
        return 0

    bench_parser.set_defaults(func=_cmd_bench)

    # Simple 'version' subcommand for shells/users preferring explicit command
    version_parser = sub.add_parser("version", help="Show version and exit")
    version_parser.set_defaults(func=lambda _: (print(f"latstat {__version__}"), 0)[1])

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()
    if args.verbose:
        set_verbose(True)
    if not getattr(args, "cmd", None):  # No subcommand provided
        parser.print_help()
        return 0
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
