"""Package metadata for latstat.

Expose a single source of truth for the version. Prefer reading from
importlib.metadata so that an editable install or wheel always reports
the version declared in pyproject.toml. Fallback to a hardcoded string
when metadata is unavailable (direct source usage without installation).
"""

from __future__ import annotations

from importlib import metadata as _metadata

from .aggregate import Aggregate, build_aggregate
from .quantiles import QuantileResult, estimate_quantile
from .report import format_aggregate

__all__ = [
	"__version__",
	"Aggregate",
	"QuantileResult",
	"build_aggregate",
	"estimate_quantile",
	"format_aggregate",
]

_FALLBACK_VERSION = "0.1.0"  # MUST match pyproject.toml [project].version

try:  # pragma: no cover - success path covered indirectly via CLI test
	__version__ = _metadata.version("latstat")  # type: ignore[assignment]
except _metadata.PackageNotFoundError:  # pragma: no cover - fallback exercised if metadata missing
	__version__ = _FALLBACK_VERSION
