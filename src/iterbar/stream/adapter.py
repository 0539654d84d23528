from __future__ import annotations

from collections.abc import Iterator, Sized
from dataclasses import replace
import logging
import sys
import time
from typing import Callable, Generator, Iterable, TextIO, TypeVar

from ..config import BarConfig
from ..core.engine import UNKNOWN_TOTAL, ProgressEngine


logger = logging.getLogger(__name__)

T = TypeVar("T")


def count_total(iterable: Iterable[object]) -> int:
    """Count ``iterable`` up front, or return ``UNKNOWN_TOTAL``.

    Sized sources report ``len()``. Re-iterable sources get a counting pass.
    One-shot iterators would be exhausted by counting, so they are left
    unknown and the bar runs in indeterminate mode.
    """
    if isinstance(iterable, Sized):
        return len(iterable)
    if isinstance(iterable, Iterator):
        logger.debug("source is a one-shot iterator; total left unknown")
        return UNKNOWN_TOTAL
    total = sum(1 for _ in iterable)
    logger.debug("counted %d item(s) ahead of iteration", total)
    return total


def progress(
    iterable: Iterable[T],
    total: int | None = None,
    *,
    label: str = "",
    clear_on_finish: bool = True,
    output: TextIO | None = None,
    min_render_interval: float = 0.1,
    min_items_between_checks: int = 1,
    segment_count: int = 10,
    config: BarConfig | None = None,
    clock: Callable[[], float] | None = None,
) -> Generator[T, None, None]:
    """Yield the items of ``iterable`` unchanged while drawing a progress line.

        for path in progress(paths, label="Hashing"):
            digest(path)

    Pass ``total=0`` to force indeterminate mode, or an estimate when the
    source cannot be counted; a count past the estimate switches the line to
    indeterminate mode. Display keywords left at their defaults defer to
    ``config``; keywords set to anything else override it.
    The line is finalized when iteration ends, when the consumer raises, or
    when the iterator is closed; wrap it in ``contextlib.closing`` to finalize
    promptly after a ``break``.
    """
    if total is not None and total < 0:
        raise ValueError(f"total must be >= 0, got {total}")
    defaults = BarConfig()
    options = {
        "label": label,
        "clear_on_finish": clear_on_finish,
        "min_render_interval": min_render_interval,
        "min_items_between_checks": min_items_between_checks,
        "segment_count": segment_count,
    }
    overrides = {
        name: value
        for name, value in options.items()
        if value != getattr(defaults, name)
    }
    config = replace(config or defaults, **overrides)
    return _iterate(iterable, total, config, output, clock)


def _iterate(
    iterable: Iterable[T],
    total: int | None,
    config: BarConfig,
    output: TextIO | None,
    clock: Callable[[], float] | None,
) -> Generator[T, None, None]:
    if total is None:
        total = count_total(iterable)
    if output is None:
        output = sys.stderr
    engine = ProgressEngine(total, output, config, clock=clock or time.perf_counter)

    try:
        for item in iterable:
            engine.on_item()
            yield item
    finally:
        engine.finish()
