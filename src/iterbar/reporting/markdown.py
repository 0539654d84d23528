from __future__ import annotations

from ..bench.types import BenchResults


def _format_ns(seconds: float) -> str:
    return f"{seconds * 1e9:.1f} ns"


def render_markdown(results: BenchResults) -> str:
    stats = results.stats
    lines: list[str] = []
    lines.append("## iterbar overhead")
    lines.append("")
    lines.append("**System**")
    system_lines = [
        f"- Python: {results.python_version}",
        f"- Platform: {results.platform}",
        f"- Items per run: {results.items}",
        f"- Warmups: {results.warmups}",
        f"- Runs: {results.runs}",
        f"- Total time: {stats.wall_seconds:.2f}s",
    ]
    lines.append("\n".join(system_lines))
    lines.append("")
    lines.append("**Overhead per item**")
    lines.append("")
    lines.append(
        f"{_format_ns(stats.overhead_per_item_mean)} ± "
        f"{_format_ns(stats.overhead_per_item_stdev)}"
    )
    lines.append("")
    lines.append("**Runs**")
    lines.append("")
    lines.append("| Run | Bare (s) | Wrapped (s) | Overhead / item |")
    lines.append("| --- | --- | --- | --- |")
    for index, (bare, wrapped) in enumerate(
        zip(stats.bare_seconds, stats.wrapped_seconds), start=1
    ):
        per_item = (wrapped - bare) / results.items
        lines.append(
            f"| {index} | {bare:.4f} | {wrapped:.4f} | {_format_ns(per_item)} |"
        )

    return "\n".join(lines)
