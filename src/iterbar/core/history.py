from __future__ import annotations

from collections import deque
from typing import Iterator


class BoundedHistory:
    """Fixed-capacity FIFO of recent inter-tick durations, in seconds."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"history capacity must be >= 0, got {capacity}")
        self._items: deque[float] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._items.maxlen or 0

    def push(self, duration: float) -> None:
        # deque(maxlen=...) drops the oldest entry when full.
        self._items.append(duration)

    def average(self) -> float | None:
        if not self._items:
            return None
        return sum(self._items) / len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[float]:
        return iter(self._items)
