r"""Policy retrying with exponentially growing pauses."""

from __future__ import annotations

__all__ = ["Backoff"]

from typing import TYPE_CHECKING

from aretry.backoff.exponential import ExponentialBackoff
from aretry.config import (
    DEFAULT_BACKOFF_MAX_ATTEMPTS,
    DEFAULT_BASE,
    DEFAULT_DELAY,
    DEFAULT_MAX_DELAY,
)
from aretry.policy.loop import RetryLoopPolicy

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.callbacks import RetryInfo
    from aretry.classifier import FailureClassifier
    from aretry.timer import BaseTimer


class Backoff(RetryLoopPolicy):
    """Retry with exponential backoff between consecutive attempts.

    The first retry waits ``delay`` seconds, then each pause is the
    previous one multiplied by ``base`` and capped at ``max_delay``.

    Args:
        max_attempts: Maximum number of attempts, initial attempt
            included (default: 8). ``None`` retries forever.
        delay: The first pause in seconds (default: 0.5).
        base: The multiplier applied after each retry (default: 2).
        max_delay: Optional maximum pause in seconds. ``None`` lets the
            pause grow without bound.
        timer: Timer used to pause. Defaults to ``AsyncioTimer()``.
        classifier: Optional failure classifier.
        on_retry: Optional callback invoked before each retry.

    Example:
        ```pycon
        >>> import itertools
        >>> from aretry import Backoff
        >>> policy = Backoff(max_attempts=4, delay=0.01, base=2, max_delay=0.03)
        >>> list(itertools.islice(policy.backoff.delays(), 3))
        [0.01, 0.02, 0.03]

        ```
    """

    def __init__(
        self,
        max_attempts: int | None = DEFAULT_BACKOFF_MAX_ATTEMPTS,
        delay: float = DEFAULT_DELAY,
        base: int = DEFAULT_BASE,
        max_delay: float | None = DEFAULT_MAX_DELAY,
        timer: BaseTimer | None = None,
        classifier: FailureClassifier | None = None,
        on_retry: Callable[[RetryInfo], None] | None = None,
    ) -> None:
        super().__init__(
            max_attempts=max_attempts,
            backoff=ExponentialBackoff(delay=delay, base=base, max_delay=max_delay),
            timer=timer,
            classifier=classifier,
            on_retry=on_retry,
        )

    @classmethod
    def forever(
        cls,
        delay: float = DEFAULT_DELAY,
        base: int = DEFAULT_BASE,
        max_delay: float | None = DEFAULT_MAX_DELAY,
        timer: BaseTimer | None = None,
        classifier: FailureClassifier | None = None,
        on_retry: Callable[[RetryInfo], None] | None = None,
    ) -> Backoff:
        """Retry with exponential backoff until a value is accepted."""
        return cls(
            max_attempts=None,
            delay=delay,
            base=base,
            max_delay=max_delay,
            timer=timer,
            classifier=classifier,
            on_retry=on_retry,
        )
