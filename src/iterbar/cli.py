from __future__ import annotations

import argparse
from contextlib import closing
from dataclasses import asdict, replace
import json
import logging
import sys
import time
from typing import TextIO

from .bench.perf import run_bench
from .config import BarConfig, config_from_env
from .reporting.markdown import render_markdown
from .stream.adapter import progress


def _add_bar_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--label",
        help="Text shown before the bar",
    )
    parser.add_argument(
        "--keep",
        action="store_true",
        help="Leave the final bar on screen instead of clearing it",
    )
    parser.add_argument(
        "--min-interval-ms",
        type=int,
        help="Minimum milliseconds between redraws (default: 100)",
    )
    parser.add_argument(
        "--min-iterations",
        type=int,
        help="Items to skip between redraw checks (default: 1)",
    )
    parser.add_argument(
        "--segments",
        type=int,
        help="Number of bar segments (default: 10)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iterbar",
        description="Single-line progress bars for iterables",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    demo = subparsers.add_parser("demo", help="Draw a bar over a sleeping loop")
    demo.add_argument("--count", type=int, default=1000, help="Number of items")
    demo.add_argument(
        "--delay",
        type=float,
        default=0.01,
        help="Seconds to sleep per item (default: 0.01)",
    )
    _add_bar_options(demo)

    pipe = subparsers.add_parser(
        "pipe",
        help="Copy stdin to stdout, drawing a bar on stderr",
    )
    pipe.add_argument(
        "--total",
        type=int,
        default=0,
        help="Expected line count (default: unknown)",
    )
    _add_bar_options(pipe)

    bench = subparsers.add_parser("bench", help="Measure per-item overhead")
    bench.add_argument("--items", type=int, default=100_000, help="Items per run")
    bench.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    bench.add_argument("--runs", type=int, default=5, help="Measured runs")
    bench.add_argument(
        "--json",
        action="store_true",
        help="Emit raw JSON instead of Markdown",
    )
    _add_bar_options(bench)
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _bar_config(args: argparse.Namespace) -> BarConfig:
    config = config_from_env()
    overrides: dict[str, object] = {}
    if args.label is not None:
        overrides["label"] = args.label
    if args.keep:
        overrides["clear_on_finish"] = False
    if args.min_interval_ms is not None:
        overrides["min_render_interval"] = args.min_interval_ms / 1000
    if args.min_iterations is not None:
        overrides["min_items_between_checks"] = args.min_iterations
    if args.segments is not None:
        overrides["segment_count"] = args.segments
    return replace(config, **overrides)


def _run_demo(args: argparse.Namespace, config: BarConfig, stderr: TextIO) -> int:
    for _ in progress(range(args.count), output=stderr, config=config):
        time.sleep(args.delay)
    return 0


def _run_pipe(
    args: argparse.Namespace,
    config: BarConfig,
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
) -> int:
    lines = progress(stdin, total=args.total, output=stderr, config=config)
    try:
        with closing(lines):
            for line in lines:
                stdout.write(line)
            stdout.flush()
    except BrokenPipeError:
        return 1
    return 0


def _run_bench(args: argparse.Namespace, config: BarConfig, stdout: TextIO) -> int:
    results = run_bench(
        items=args.items,
        warmups=args.warmups,
        runs=args.runs,
        bar_config=config,
    )
    if args.json:
        stdout.write(json.dumps(asdict(results), indent=2) + "\n")
    else:
        stdout.write(render_markdown(results) + "\n")
    return 0


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    try:
        config = _bar_config(args)
    except ValueError as exc:
        parser.error(str(exc))

    if args.command == "demo":
        return _run_demo(args, config, stderr)
    if args.command == "pipe":
        if args.total < 0:
            parser.error("--total must be >= 0")
        return _run_pipe(args, config, stdin, stdout, stderr)
    if args.items < 1 or args.runs < 1 or args.warmups < 0:
        parser.error("--items and --runs must be >= 1, --warmups must be >= 0")
    return _run_bench(args, config, stdout)
