"""Single-line progress bars for any iterable.

    from iterbar import progress

    for row in progress(rows, label="Loading"):
        load(row)

    # Loading: |###-------| 392/1000 39% [elapsed: 00:00:04 left: 00:00:06, 100.0 iters/sec]
"""
from __future__ import annotations

from .config import BarConfig, config_from_env
from .core.engine import UNKNOWN_TOTAL, Phase, ProgressEngine
from .core.formatting import format_duration, format_status
from .core.history import BoundedHistory
from .core.rate import RateEstimator
from .stream.adapter import count_total, progress

__all__ = [
    "BarConfig",
    "BoundedHistory",
    "Phase",
    "ProgressEngine",
    "RateEstimator",
    "UNKNOWN_TOTAL",
    "config_from_env",
    "count_total",
    "format_duration",
    "format_status",
    "progress",
]
