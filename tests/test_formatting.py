from __future__ import annotations

import pytest

from iterbar.core.formatting import (
    format_bar,
    format_duration,
    format_percentage,
    format_rate,
    format_remaining,
    format_status,
    is_determinate,
)


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0.0, "00:00:00"),
        (5.0, "00:00:05"),
        (59.9, "00:00:59"),
        (61.0, "00:01:01"),
        (3661.0, "01:01:01"),
        (36000.0, "10:00:00"),
        (360000.0, "100:00:00"),
    ],
)
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


def test_format_bar():
    assert format_bar(3, 10) == "###-------"
    assert format_bar(0, 4) == "----"
    assert format_bar(4, 4) == "####"


def test_format_percentage_rounds_half_up():
    assert format_percentage(0.392) == "39%"
    assert format_percentage(0.125) == "13%"
    assert format_percentage(1.0) == "100%"


def test_format_rate():
    assert format_rate(None) == "0"
    assert format_rate(0.01) == "100.0"
    assert format_rate(0.3) == "3.33"
    assert format_rate(0.25) == "4.0"
    assert format_rate(1 / 3.3) == "3.3"


def test_format_rate_stays_fixed_point_for_huge_rates():
    assert format_rate(1e-17) == "100000000000000000.0"
    assert "e" not in format_rate(1e-30)


def test_format_remaining():
    assert format_remaining(None, 1, 10) == "?"
    assert format_remaining(2.0, 5, 100) == "00:03:10"


def test_is_determinate():
    assert is_determinate(0, 5)
    assert is_determinate(5, 5)
    assert not is_determinate(6, 5)
    assert not is_determinate(0, 0)
    assert not is_determinate(10, 0)


def test_determinate_status_line():
    line = format_status(392, 1000, 10, 4.627, 0.01)
    assert line == (
        "|###-------| 392/1000 39% "
        "[elapsed: 00:00:04 left: 00:00:06, 100.0 iters/sec]"
    )


def test_determinate_status_without_rate():
    line = format_status(0, 50, 10, 0.0, None)
    assert line == "|----------| 0/50 0% [elapsed: 00:00:00 left: ?, 0 iters/sec]"


def test_indeterminate_when_total_unknown():
    assert format_status(296, 0, 10, 3.5, None) == "296 [elapsed: 00:00:03, 0 iters/sec]"


def test_indeterminate_when_total_exceeded():
    line = format_status(6, 5, 10, 7.0, 1.0)
    assert line == "6 [elapsed: 00:00:07, 1.0 iters/sec]"
    assert "|" not in line
    assert "%" not in line


def test_segment_count_controls_bar_resolution():
    line = format_status(1, 4, 4, 0.0, None)
    assert line.startswith("|#---| 1/4 25% ")
