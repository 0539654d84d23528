from __future__ import annotations

from enum import Enum
import logging
import time
from typing import Callable, TextIO

from ..config import BarConfig
from .formatting import format_status
from .history import BoundedHistory
from .rate import RateEstimator


logger = logging.getLogger(__name__)

UNKNOWN_TOTAL = 0


class Phase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"


class ProgressEngine:
    """Tick-driven progress line renderer.

    ``on_item()`` is called once per item as it is pulled from the source and
    ``finish()`` exactly once at the end. The rendered count is the number of
    items completed before the current one, so the first tick renders 0.

    ``total`` of ``UNKNOWN_TOTAL`` (0) forces indeterminate mode, as does a
    count that grows past ``total``.
    """

    def __init__(
        self,
        total: int,
        output: TextIO,
        config: BarConfig | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        if total < 0:
            raise ValueError(f"total must be >= 0, got {total}")
        self.config = config or BarConfig()
        self.total = total
        self.output = output
        self.clock = clock
        self.prefix = self.config.prefix

        self.history = BoundedHistory(self.config.history_capacity)
        self.rate = RateEstimator(self.config.smoothing)
        self.phase = Phase.IDLE

        now = clock()
        self.count = 0
        self.last_printed_count = 0
        self.start_time = now
        self.last_render_time = now
        self.last_tick_time = now
        self.last_rendered_length = 0
        self.renders = 0

    def on_item(self) -> None:
        if self.phase is Phase.FINISHED:
            raise RuntimeError("on_item() called after finish()")

        if self.phase is Phase.IDLE:
            now = self.clock()
            self.rate.update(self.history)
            self._render(now)
            self.last_tick_time = now
            self.count = 1
            self.phase = Phase.RUNNING
            return

        if self.count - self.last_printed_count < self.config.min_items_between_checks:
            self._record_tick(self.clock())
            self.count += 1
            return

        now = self.clock()
        if now - self.last_render_time >= self.config.min_render_interval:
            self.rate.update(self.history)
            self._render(now)
            self.last_printed_count = self.count
            self.last_render_time = now
        self._record_tick(now)
        self.count += 1

    def finish(self) -> None:
        if self.phase is Phase.FINISHED:
            logger.debug("finish() called twice; ignoring")
            return
        now = self.clock()
        self._render(now)
        if self.config.clear_on_finish:
            width = len(self.prefix) + self.last_rendered_length
            self.output.write("\r" + " " * width + "\r")
        else:
            self.output.write("\n")
        self.output.flush()
        self.phase = Phase.FINISHED
        logger.debug(
            "finished after %d item(s) in %.3fs (%d render(s))",
            self.count,
            now - self.start_time,
            self.renders,
        )

    @property
    def smoothed_rate(self) -> float | None:
        return self.rate.smoothed

    def status(self, now: float) -> str:
        return format_status(
            self.count,
            self.total,
            self.config.segment_count,
            now - self.start_time,
            self.rate.smoothed,
        )

    def _record_tick(self, now: float) -> None:
        self.history.push(now - self.last_tick_time)
        self.last_tick_time = now

    def _render(self, now: float) -> None:
        status = self.status(now)
        padding = " " * max(self.last_rendered_length - len(status), 0)
        self.output.write(f"\r{self.prefix}{status}{padding}")
        self.output.flush()
        self.last_rendered_length = len(status)
        self.renders += 1
