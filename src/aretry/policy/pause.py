r"""Policy retrying after a fixed pause."""

from __future__ import annotations

__all__ = ["Pause"]

from typing import TYPE_CHECKING

from aretry.backoff.constant import ConstantBackoff
from aretry.config import DEFAULT_DELAY, DEFAULT_PAUSE_MAX_ATTEMPTS
from aretry.policy.loop import RetryLoopPolicy

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.callbacks import RetryInfo
    from aretry.classifier import FailureClassifier
    from aretry.timer import BaseTimer


class Pause(RetryLoopPolicy):
    """Retry with the same pause between consecutive attempts.

    Args:
        max_attempts: Maximum number of attempts, initial attempt
            included (default: 4). ``None`` retries forever.
        delay: The pause in seconds between two attempts (default: 0.5).
        timer: Timer used to pause. Defaults to ``AsyncioTimer()``.
        classifier: Optional failure classifier.
        on_retry: Optional callback invoked before each retry.

    Example:
        ```pycon
        >>> from aretry import Pause
        >>> policy = Pause(max_attempts=5, delay=1.0)
        >>> policy.backoff
        ConstantBackoff(delay=1.0)

        ```
    """

    def __init__(
        self,
        max_attempts: int | None = DEFAULT_PAUSE_MAX_ATTEMPTS,
        delay: float = DEFAULT_DELAY,
        timer: BaseTimer | None = None,
        classifier: FailureClassifier | None = None,
        on_retry: Callable[[RetryInfo], None] | None = None,
    ) -> None:
        super().__init__(
            max_attempts=max_attempts,
            backoff=ConstantBackoff(delay=delay),
            timer=timer,
            classifier=classifier,
            on_retry=on_retry,
        )

    @property
    def delay(self) -> float:
        return self.backoff.delay

    @classmethod
    def forever(
        cls,
        delay: float = DEFAULT_DELAY,
        timer: BaseTimer | None = None,
        classifier: FailureClassifier | None = None,
        on_retry: Callable[[RetryInfo], None] | None = None,
    ) -> Pause:
        """Retry with a fixed pause until a value is accepted."""
        return cls(
            max_attempts=None,
            delay=delay,
            timer=timer,
            classifier=classifier,
            on_retry=on_retry,
        )
