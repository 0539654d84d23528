from __future__ import annotations

import pytest


class FakeClock:
    """Returns ``now`` and then advances it by ``step`` on every call."""

    def __init__(self, start: float = 0.0, step: float = 0.0) -> None:
        self.now = start
        self.step = step
        self.calls = 0

    def __call__(self) -> float:
        value = self.now
        self.now += self.step
        self.calls += 1
        return value


@pytest.fixture
def make_clock():
    def _make(start: float = 0.0, step: float = 0.0) -> FakeClock:
        return FakeClock(start=start, step=step)

    return _make


@pytest.fixture(autouse=True)
def _clear_iterbar_env(monkeypatch):
    for name in (
        "ITERBAR_MIN_INTERVAL_MS",
        "ITERBAR_MIN_ITERATIONS",
        "ITERBAR_SEGMENTS",
        "ITERBAR_CLEAR",
    ):
        monkeypatch.delenv(name, raising=False)
