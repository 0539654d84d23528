from __future__ import annotations

from .history import BoundedHistory


DEFAULT_SMOOTHING = 0.8


class RateEstimator:
    """Seconds-per-item estimate smoothed over render cycles.

    The moving average of the history absorbs jitter between ticks; the
    exponential layer on top damps jumps of that average between renders.
    A higher ``smoothing`` weighs the previous estimate more heavily.
    """

    def __init__(self, smoothing: float = DEFAULT_SMOOTHING) -> None:
        if not 0.0 <= smoothing < 1.0:
            raise ValueError(f"smoothing must be in [0, 1), got {smoothing}")
        self.smoothing = smoothing
        self.smoothed: float | None = None

    def update(self, history: BoundedHistory) -> float | None:
        moving_avg = history.average()
        # A zero average would make the rate infinite; keep the last estimate.
        if moving_avg is None or moving_avg <= 0:
            return self.smoothed
        if self.smoothed is None:
            self.smoothed = moving_avg
        else:
            self.smoothed = (
                moving_avg * (1 - self.smoothing) + self.smoothed * self.smoothing
            )
        return self.smoothed

    def per_second(self) -> float | None:
        if self.smoothed is None:
            return None
        return 1 / self.smoothed

    def remaining(self, items_left: int) -> float | None:
        if self.smoothed is None:
            return None
        return self.smoothed * items_left
