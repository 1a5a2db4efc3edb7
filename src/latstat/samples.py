"""Read duration samples recorded by an external harness.

One sample per line. A line is either a duration with a unit suffix
(``12.5ms``, ``1.2s``, ``850us``) or a bare number interpreted in the
configured unit.
"""
from __future__ import annotations

import re
import sys
from typing import Iterable, List, Optional, TextIO

from .config import UNIT_SCALE, SummaryConfig
from .durations import parse_duration
from .logutil import get_logger

_BARE_NUMBER = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)$")


class SampleError(ValueError):
    def __init__(self, source: str, lineno: int, reason: str) -> None:
        super().__init__(f"{source}:{lineno}: {reason}")
        self.source = source
        self.lineno = lineno


def parse_sample(text: str, unit: str = "ms") -> int:
    s = text.strip()
    if _BARE_NUMBER.match(s):
        if unit not in UNIT_SCALE:
            raise ValueError(f"unknown unit {unit!r}")
        s = s + unit
    value = parse_duration(s)
    if value < 0:
        raise ValueError(f"negative duration {text.strip()!r}")
    return value


def iter_samples(lines: Iterable[str], cfg: SummaryConfig, source: str = "<input>") -> Iterable[int]:
    log = get_logger()
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or (cfg.comment_prefix and line.startswith(cfg.comment_prefix)):
            continue
        try:
            yield parse_sample(line, cfg.unit)
        except ValueError as exc:
            if cfg.strict:
                raise SampleError(source, lineno, str(exc)) from exc
            log.warning("skipped malformed sample %s:%d: %s", source, lineno, exc)


def read_samples(path: str, cfg: Optional[SummaryConfig] = None, stdin: Optional[TextIO] = None) -> List[int]:
    """Read all samples from ``path`` (``-`` reads standard input)."""
    cfg = cfg or SummaryConfig()
    if path == "-":
        return list(iter_samples(stdin or sys.stdin, cfg, source="<stdin>"))
    with open(path, "r", encoding="utf-8", errors="replace") as handle:
        samples = list(iter_samples(handle, cfg, source=path))
    get_logger().debug("read %d samples from %s", len(samples), path)
    return samples


__all__ = ["SampleError", "parse_sample", "iter_samples", "read_samples"]
