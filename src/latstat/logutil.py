"""Project-wide logging utilities.

One lazily configured "latstat" logger shared by the sample reader and the
aggregate builder. Warnings cover malformed sample lines that were skipped and
an aggregate that could not be built; the per-file sample count is logged at
DEBUG and shows up with the CLI --verbose flag. Applications embedding latstat
can override handlers or levels as needed.
"""
from __future__ import annotations

import logging
from typing import Optional

_LOGGER: Optional[logging.Logger] = None


def get_logger() -> logging.Logger:
    global _LOGGER
    if _LOGGER is None:
        logger = logging.getLogger("latstat")
        # Only add a handler if the application hasn't configured logging.
        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("[%(name)s] %(levelname)s: %(message)s")
            handler.setFormatter(formatter)
            logger.addHandler(handler)
        logger.setLevel(logging.WARNING)
        _LOGGER = logger
    return _LOGGER


def set_verbose(enabled: bool = True) -> None:
    get_logger().setLevel(logging.DEBUG if enabled else logging.WARNING)

__all__ = ["get_logger", "set_verbose"]
