from __future__ import annotations

from dataclasses import dataclass, replace
import os
from typing import Mapping

from .core.rate import DEFAULT_SMOOTHING


DEFAULT_HISTORY_CAPACITY = 250

_TRUE_VALUES = {"1", "true", "yes", "y"}
_FALSE_VALUES = {"0", "false", "no", "n"}


@dataclass(frozen=True)
class BarConfig:
    label: str = ""
    clear_on_finish: bool = True
    min_render_interval: float = 0.1
    min_items_between_checks: int = 1
    segment_count: int = 10
    history_capacity: int = DEFAULT_HISTORY_CAPACITY
    smoothing: float = DEFAULT_SMOOTHING

    def __post_init__(self) -> None:
        if self.min_render_interval < 0:
            raise ValueError(
                f"min_render_interval must be >= 0, got {self.min_render_interval}"
            )
        if self.min_items_between_checks < 1:
            raise ValueError(
                "min_items_between_checks must be >= 1, "
                f"got {self.min_items_between_checks}"
            )
        if self.segment_count < 1:
            raise ValueError(f"segment_count must be >= 1, got {self.segment_count}")
        if self.history_capacity < 0:
            raise ValueError(
                f"history_capacity must be >= 0, got {self.history_capacity}"
            )
        if not 0.0 <= self.smoothing < 1.0:
            raise ValueError(f"smoothing must be in [0, 1), got {self.smoothing}")

    @property
    def prefix(self) -> str:
        if not self.label:
            return ""
        return f"{self.label}: "


def _env_int(environ: Mapping[str, str], name: str) -> int | None:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_bool(environ: Mapping[str, str], name: str) -> bool | None:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return None
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def config_from_env(
    environ: Mapping[str, str] | None = None,
    base: BarConfig | None = None,
) -> BarConfig:
    """Apply ``ITERBAR_*`` overrides on top of ``base``."""
    if environ is None:
        environ = os.environ
    config = base or BarConfig()
    overrides: dict[str, object] = {}

    interval_ms = _env_int(environ, "ITERBAR_MIN_INTERVAL_MS")
    if interval_ms is not None:
        overrides["min_render_interval"] = interval_ms / 1000
    min_iterations = _env_int(environ, "ITERBAR_MIN_ITERATIONS")
    if min_iterations is not None:
        overrides["min_items_between_checks"] = min_iterations
    segments = _env_int(environ, "ITERBAR_SEGMENTS")
    if segments is not None:
        overrides["segment_count"] = segments
    clear = _env_bool(environ, "ITERBAR_CLEAR")
    if clear is not None:
        overrides["clear_on_finish"] = clear

    if not overrides:
        return config
    return replace(config, **overrides)
