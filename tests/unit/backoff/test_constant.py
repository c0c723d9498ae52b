r"""Unit tests for ConstantBackoff strategy."""

from __future__ import annotations

import itertools

import pytest

from aretry.backoff import ConstantBackoff


def test_constant_backoff_delays() -> None:
    """Test that every delay is the same."""
    backoff = ConstantBackoff(delay=2.5)
    assert list(itertools.islice(backoff.delays(), 4)) == [2.5, 2.5, 2.5, 2.5]


def test_constant_backoff_default_values() -> None:
    """Test constant backoff with default values."""
    backoff = ConstantBackoff()
    assert backoff.delay == 0.5
    assert next(backoff.delays()) == 0.5


def test_constant_backoff_zero_delay() -> None:
    """Test constant backoff with zero delay."""
    assert list(itertools.islice(ConstantBackoff(delay=0.0).delays(), 2)) == [0.0, 0.0]


def test_constant_backoff_invalid_delay() -> None:
    """Test that negative delay raises ValueError."""
    with pytest.raises(ValueError, match=r"delay must be non-negative"):
        ConstantBackoff(delay=-1.0)


def test_constant_backoff_repr() -> None:
    """Test the string representation."""
    assert repr(ConstantBackoff(delay=1.0)) == "ConstantBackoff(delay=1.0)"
