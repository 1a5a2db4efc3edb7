"""Integer nanosecond durations and their compact text form.

A duration is a plain ``int`` counting nanoseconds. Rendering follows the
familiar compact notation (``10ms``, ``1.5µs``, ``1m30s``) so summaries read
naturally next to the output of other load-testing tools.
"""
from __future__ import annotations

import math
import re
from datetime import timedelta

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

_SUFFIXES = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # U+00B5 micro sign
    "μs": MICROSECOND,  # U+03BC greek mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

# Longer suffixes first so "ms" wins over "m"
_COMPONENT_RE = re.compile(r"(\d+\.?\d*|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def _frac(value: int, digits: int) -> str:
    if value == 0:
        return ""
    return "." + str(value).zfill(digits).rstrip("0")


def format_duration(d: int) -> str:
    """Render ``d`` nanoseconds, e.g. ``49.6ms``, ``1h2m3.5s`` or ``0s``."""
    d = int(d)
    if d == 0:
        return "0s"
    sign = "-" if d < 0 else ""
    u = abs(d)
    if u < SECOND:
        if u < MICROSECOND:
            return f"{sign}{u}ns"
        if u < MILLISECOND:
            whole, rest = divmod(u, MICROSECOND)
            return f"{sign}{whole}{_frac(rest, 3)}µs"
        whole, rest = divmod(u, MILLISECOND)
        return f"{sign}{whole}{_frac(rest, 6)}ms"

    secs, rest = divmod(u, SECOND)
    text = f"{secs % 60}{_frac(rest, 9)}s"
    mins = secs // 60
    if mins:
        text = f"{mins % 60}m{text}"
        hours = mins // 60
        if hours:
            text = f"{hours}h{text}"
    return sign + text


def parse_duration(text: str) -> int:
    """Parse a compact duration string such as ``12.5ms`` or ``1h30m``.

    Fractions below one nanosecond are truncated. Raises ValueError on
    malformed input.
    """
    s = text.strip()
    orig = s
    sign = 1
    if s[:1] in ("-", "+"):
        if s[0] == "-":
            sign = -1
        s = s[1:]
    if s == "0":
        return 0
    if not s:
        raise ValueError(f"invalid duration {orig!r}")
    total = 0
    pos = 0
    while pos < len(s):
        m = _COMPONENT_RE.match(s, pos)
        if m is None:
            raise ValueError(f"invalid duration {orig!r}")
        number, suffix = m.group(1), m.group(2)
        whole_s, _, frac_s = number.partition(".")
        scale = _SUFFIXES[suffix]
        total += int(whole_s or "0") * scale
        if frac_s:
            total += int(frac_s) * scale // 10 ** len(frac_s)
        pos = m.end()
    return sign * total


def from_seconds(seconds: float) -> int:
    """Convert float seconds (e.g. a ``time.perf_counter()`` delta), truncating."""
    if math.isnan(seconds) or math.isinf(seconds):
        raise ValueError(f"cannot convert {seconds!r} to a duration")
    return int(seconds * SECOND)


def from_timedelta(td: timedelta) -> int:
    # timedelta is exact to the microsecond; avoid the float round trip
    return (td.days * 86400 + td.seconds) * SECOND + td.microseconds * MICROSECOND


__all__ = [
    "NANOSECOND",
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "format_duration",
    "parse_duration",
    "from_seconds",
    "from_timedelta",
]
