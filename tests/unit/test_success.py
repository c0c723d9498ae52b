r"""Unit tests for success predicates."""

from __future__ import annotations

from aretry import Success

#############################
#     Tests for Success     #
#############################


def test_success_evaluate() -> None:
    """Test that evaluate applies the predicate."""
    success = Success(lambda value: value > 10)
    assert success.evaluate(42)
    assert not success.evaluate(1)


def test_success_call() -> None:
    """Test that a predicate can be called directly."""
    assert Success(lambda value: value == "done")("done")


def test_success_evaluate_returns_bool() -> None:
    """Test that truthy predicate results are converted to bool."""
    assert Success(lambda value: value).evaluate([1]) is True
    assert Success(lambda value: value).evaluate([]) is False


def test_success_always() -> None:
    """Test that the default predicate accepts every value."""
    success = Success.always()
    assert success.evaluate(None)
    assert success.evaluate(0)
    assert success.evaluate("anything")


def test_success_or_forced() -> None:
    """Test that or_(True) accepts values rejected by the predicate."""
    never = Success(lambda value: False)
    assert never.or_(True).evaluate(1)


def test_success_or_not_forced() -> None:
    """Test that or_(False) keeps the original decision."""
    success = Success(lambda value: value > 10)
    combined = success.or_(False)
    assert combined.evaluate(42)
    assert not combined.evaluate(1)


def test_success_of_none() -> None:
    """Test that None normalizes to the default predicate."""
    assert Success.of(None).evaluate(object())


def test_success_of_callable() -> None:
    """Test that a plain callable is wrapped."""
    success = Success.of(lambda value: value == 3)
    assert isinstance(success, Success)
    assert success.evaluate(3)
    assert not success.evaluate(4)


def test_success_of_success() -> None:
    """Test that a Success instance is returned unchanged."""
    success = Success(lambda value: True)
    assert Success.of(success) is success
