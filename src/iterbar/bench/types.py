from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OverheadStats:
    bare_seconds: list[float]
    wrapped_seconds: list[float]
    overhead_per_item_mean: float
    overhead_per_item_stdev: float
    wall_seconds: float


@dataclass(frozen=True)
class BenchResults:
    items: int
    warmups: int
    runs: int
    python_version: str
    platform: str
    stats: OverheadStats
