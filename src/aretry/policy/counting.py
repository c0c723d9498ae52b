r"""Attempt counter shared by the bounded policies."""

from __future__ import annotations

__all__ = ["Countdown"]

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from aretry.success import Success

T = TypeVar("T")


@dataclass(frozen=True)
class Countdown:
    """Number of attempts left after the current one.

    A bounded retry chain starts with ``Countdown.start(max_attempts)``
    and moves to ``next()`` after every attempt. Once no attempt is left,
    the success predicate is forced so the last attempt's outcome is
    returned as is, instead of triggering an extra attempt.

    Args:
        remaining: The number of attempts left after the current one.

    Example:
        ```pycon
        >>> from aretry.policy.counting import Countdown
        >>> countdown = Countdown.start(2)
        >>> countdown.exhausted
        False
        >>> countdown.next().exhausted
        True

        ```
    """

    remaining: int

    @classmethod
    def start(cls, max_attempts: int) -> Countdown:
        return cls(remaining=max_attempts - 1)

    @property
    def exhausted(self) -> bool:
        return self.remaining < 1

    def next(self) -> Countdown:
        return Countdown(remaining=self.remaining - 1)

    def success(self, success: Success[T]) -> Success[T]:
        """Return the predicate to use for the current attempt."""
        return success.or_(self.exhausted)
