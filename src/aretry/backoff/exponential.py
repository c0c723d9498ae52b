r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

from typing import TYPE_CHECKING

from aretry.backoff.base import BaseBackoffStrategy
from aretry.config import DEFAULT_BASE, DEFAULT_DELAY, DEFAULT_MAX_DELAY
from aretry.utils.validation import validate_backoff_params

if TYPE_CHECKING:
    from collections.abc import Iterator


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    The first retry waits ``delay`` seconds. Each following delay is the
    previous one multiplied by ``base`` and capped at ``max_delay``:
    ``d(n+1) = min(d(n) * base, max_delay)``. Without ``max_delay`` the
    delay grows without bound.

    Args:
        delay: The initial delay in seconds (default: 0.5).
        base: The multiplier applied after each retry (default: 2).
        max_delay: Optional maximum delay cap in seconds. If specified,
            delays will not exceed this value.

    Example:
        ```pycon
        >>> import itertools
        >>> from aretry.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(delay=1.0)
        >>> list(itertools.islice(backoff.delays(), 4))
        [1.0, 2.0, 4.0, 8.0]
        >>> # With max_delay cap
        >>> backoff = ExponentialBackoff(delay=1.0, max_delay=5.0)
        >>> list(itertools.islice(backoff.delays(), 5))
        [1.0, 2.0, 4.0, 5.0, 5.0]

        ```
    """

    def __init__(
        self,
        delay: float = DEFAULT_DELAY,
        base: int = DEFAULT_BASE,
        max_delay: float | None = DEFAULT_MAX_DELAY,
    ) -> None:
        validate_backoff_params(delay=delay, base=base, max_delay=max_delay)
        self.delay = delay
        self.base = base
        self.max_delay = max_delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(delay={self.delay}, base={self.base}, "
            f"max_delay={self.max_delay})"
        )

    def next_delay(self, delay: float) -> float:
        """Compute the delay following ``delay``.

        Args:
            delay: The current delay in seconds.

        Returns:
            ``delay * base``, capped at ``max_delay`` if set.

        Example:
            ```pycon
            >>> from aretry.backoff import ExponentialBackoff
            >>> ExponentialBackoff(delay=1.0, base=3, max_delay=5.0).next_delay(1.0)
            3.0
            >>> ExponentialBackoff(delay=1.0, base=3, max_delay=5.0).next_delay(3.0)
            5.0

            ```
        """
        delay = delay * self.base
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay

    def delays(self) -> Iterator[float]:
        delay = self.delay
        while True:
            yield delay
            delay = self.next_delay(delay)
