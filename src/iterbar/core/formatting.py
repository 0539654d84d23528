from __future__ import annotations

import math


FILLED_GLYPH = "#"
EMPTY_GLYPH = "-"


def format_time_component(value: int) -> str:
    if value < 10:
        return f"0{value}"
    return str(value)


def format_duration(seconds: float) -> str:
    minutes = math.trunc(seconds / 60)
    hours = minutes // 60
    rem_minutes = minutes - hours * 60
    whole_seconds = math.trunc(seconds - minutes * 60)
    return ":".join(
        format_time_component(part) for part in (hours, rem_minutes, whole_seconds)
    )


def format_bar(filled: int, segment_count: int) -> str:
    return FILLED_GLYPH * filled + EMPTY_GLYPH * (segment_count - filled)


def format_percentage(progress: float) -> str:
    # Half-up rounding, so 12.5% shows as 13%.
    return f"{math.floor(progress * 100 + 0.5)}%"


def format_rate(smoothed: float | None) -> str:
    if smoothed is None:
        return "0"
    # Fixed point with at most two decimals: 100.0, 3.3, 3.33, never 1e+17.
    text = f"{1 / smoothed:.2f}".rstrip("0")
    if text.endswith("."):
        text += "0"
    return text


def format_remaining(smoothed: float | None, count: int, total: int) -> str:
    if smoothed is None:
        return "?"
    return format_duration(smoothed * (total - count))


def is_determinate(count: int, total: int) -> bool:
    return total > 0 and count <= total


def format_status(
    count: int,
    total: int,
    segment_count: int,
    elapsed: float,
    smoothed: float | None,
) -> str:
    """Render the status line without the label prefix.

    Determinate mode shows a bar, percentage and remaining time; once the
    total is unknown (0) or exceeded only the count, elapsed time and rate
    are shown.
    """
    elapsed_str = format_duration(elapsed)
    rate = format_rate(smoothed)

    if not is_determinate(count, total):
        return f"{count} [elapsed: {elapsed_str}, {rate} iters/sec]"

    progress = count / total
    bar = format_bar(math.floor(progress * segment_count), segment_count)
    percentage = format_percentage(progress)
    left = format_remaining(smoothed, count, total)
    return (
        f"|{bar}| {count}/{total} {percentage} "
        f"[elapsed: {elapsed_str} left: {left}, {rate} iters/sec]"
    )
