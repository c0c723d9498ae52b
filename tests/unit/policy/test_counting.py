r"""Unit tests for the attempt countdown."""

from __future__ import annotations

from aretry import Success
from aretry.policy import Countdown

###############################
#     Tests for Countdown     #
###############################


def test_countdown_start() -> None:
    """Test that the first attempt leaves max_attempts - 1 attempts."""
    assert Countdown.start(3).remaining == 2


def test_countdown_next_decreases_by_one() -> None:
    """Test that next removes exactly one attempt."""
    assert Countdown(remaining=2).next() == Countdown(remaining=1)


def test_countdown_exhausted() -> None:
    """Test when the countdown is exhausted."""
    assert not Countdown(remaining=1).exhausted
    assert Countdown(remaining=0).exhausted
    assert Countdown.start(1).exhausted


def test_countdown_sequence() -> None:
    """Test that max_attempts counts attempts, not retries."""
    countdown = Countdown.start(3)
    exhausted = [countdown.exhausted]
    for _ in range(2):
        countdown = countdown.next()
        exhausted.append(countdown.exhausted)
    assert exhausted == [False, False, True]


def test_countdown_success_not_forced() -> None:
    """Test that the predicate is unchanged while attempts remain."""
    success = Countdown(remaining=1).success(Success(lambda value: False))
    assert not success.evaluate("value")


def test_countdown_success_forced() -> None:
    """Test that the predicate is forced once no attempt remains."""
    success = Countdown(remaining=0).success(Success(lambda value: False))
    assert success.evaluate("value")
