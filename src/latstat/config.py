from dataclasses import dataclass

from .durations import MICROSECOND, MILLISECOND, NANOSECOND, SECOND


@dataclass
class SummaryConfig:
    # Unit applied to bare numbers in sample files (e.g. "12.5" with unit=ms)
    unit: str = "ms"
    # Abort on the first malformed line instead of skipping it
    strict: bool = False
    # Lines starting with this prefix are ignored
    comment_prefix: str = "#"
    # Minimum spaces between the label column and the value column
    padding: int = 1


# Scale of each accepted bare-number unit, in nanoseconds
UNIT_SCALE = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "ms": MILLISECOND,
    "s": SECOND,
}
