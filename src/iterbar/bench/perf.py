from __future__ import annotations

from dataclasses import dataclass
import io
import platform
import statistics
import sys
import time
from typing import Callable

import pyperf

from ..config import BarConfig
from ..stream.adapter import progress
from .types import BenchResults, OverheadStats


@dataclass(frozen=True)
class PerfConfig:
    warmups: int
    runs: int


def _time_runs(name: str, run_once: Callable[[], None], config: PerfConfig) -> list[float]:
    for _ in range(config.warmups):
        run_once()

    elapsed_values: list[float] = []
    for _ in range(config.runs):
        start = time.perf_counter()
        run_once()
        elapsed_values.append(time.perf_counter() - start)

    # Store elapsed seconds with a valid pyperf unit to satisfy metadata rules.
    _ = pyperf.Run(
        elapsed_values,
        metadata={"name": name, "unit": "second"},
        collect_metadata=False,
    )
    return elapsed_values


def measure_overhead(
    items: int,
    config: PerfConfig,
    bar_config: BarConfig | None = None,
) -> OverheadStats:
    if items < 1:
        raise ValueError(f"items must be >= 1, got {items}")
    if config.runs < 1:
        raise ValueError(f"runs must be >= 1, got {config.runs}")
    bar_config = bar_config or BarConfig()
    start_wall = time.perf_counter()
    if config.warmups:
        sys.stderr.write(f"warmup: {items} item(s) ({config.warmups} run(s))\n")
        sys.stderr.flush()

    def run_bare() -> None:
        for _ in range(items):
            pass

    def run_wrapped() -> None:
        for _ in progress(range(items), output=io.StringIO(), config=bar_config):
            pass

    bare = _time_runs("bare", run_bare, config)
    wrapped = _time_runs("wrapped", run_wrapped, config)

    per_item = [(w - b) / items for b, w in zip(bare, wrapped)]
    per_item_mean = statistics.fmean(per_item)
    per_item_stdev = statistics.stdev(per_item) if len(per_item) >= 2 else 0.0

    return OverheadStats(
        bare_seconds=bare,
        wrapped_seconds=wrapped,
        overhead_per_item_mean=per_item_mean,
        overhead_per_item_stdev=per_item_stdev,
        wall_seconds=time.perf_counter() - start_wall,
    )


def run_bench(
    items: int,
    warmups: int = 1,
    runs: int = 3,
    bar_config: BarConfig | None = None,
) -> BenchResults:
    config = PerfConfig(warmups=warmups, runs=runs)
    stats = measure_overhead(items, config, bar_config)
    return BenchResults(
        items=items,
        warmups=warmups,
        runs=runs,
        python_version=platform.python_version(),
        platform=sys.platform,
        stats=stats,
    )
