from __future__ import annotations

import pytest

from iterbar.core.history import BoundedHistory
from iterbar.core.rate import RateEstimator


def test_no_samples_leaves_rate_unset():
    estimator = RateEstimator()
    assert estimator.update(BoundedHistory(10)) is None
    assert estimator.per_second() is None
    assert estimator.remaining(10) is None


def test_first_estimate_is_the_moving_average():
    history = BoundedHistory(10)
    history.push(0.5)
    history.push(1.5)
    estimator = RateEstimator()
    assert estimator.update(history) == pytest.approx(1.0)


def test_later_estimates_are_exponentially_smoothed():
    history = BoundedHistory(10)
    history.push(1.0)
    estimator = RateEstimator(smoothing=0.8)
    estimator.update(history)

    history.push(3.0)
    # moving average 2.0 -> 2.0 * 0.2 + 1.0 * 0.8
    assert estimator.update(history) == pytest.approx(1.2)


def test_constant_deltas_converge_to_inverse_rate():
    history = BoundedHistory(250)
    estimator = RateEstimator()
    for _ in range(50):
        history.push(0.02)
        estimator.update(history)
    for _ in range(1000):
        history.push(0.01)
        estimator.update(history)
    assert estimator.per_second() == pytest.approx(100.0, abs=0.01)


def test_zero_average_keeps_previous_estimate():
    history = BoundedHistory(1)
    estimator = RateEstimator()
    history.push(0.5)
    estimator.update(history)
    history.push(0.0)
    assert estimator.update(history) == pytest.approx(0.5)


def test_zero_average_without_estimate_stays_unset():
    history = BoundedHistory(2)
    history.push(0.0)
    estimator = RateEstimator()
    assert estimator.update(history) is None


def test_remaining_scales_with_items_left():
    history = BoundedHistory(4)
    history.push(0.25)
    estimator = RateEstimator()
    estimator.update(history)
    assert estimator.per_second() == pytest.approx(4.0)
    assert estimator.remaining(8) == pytest.approx(2.0)


@pytest.mark.parametrize("smoothing", [-0.1, 1.0, 1.5])
def test_invalid_smoothing_is_rejected(smoothing):
    with pytest.raises(ValueError):
        RateEstimator(smoothing=smoothing)
