r"""Iterative retry loop shared by Directly, Pause, and Backoff."""

from __future__ import annotations

__all__ = ["RetryLoopPolicy"]

import logging
from typing import TYPE_CHECKING, TypeVar

from aretry.callbacks import invoke_on_retry
from aretry.policy.base import BasePolicy
from aretry.policy.counting import Countdown
from aretry.timer import AsyncioTimer
from aretry.utils.validation import validate_max_attempts

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.backoff.base import BaseBackoffStrategy
    from aretry.callbacks import RetryInfo
    from aretry.classifier import FailureClassifier
    from aretry.success import Success
    from aretry.timer import BaseTimer

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class RetryLoopPolicy(BasePolicy):
    """Policy retrying an operation in a loop, optionally with delays.

    Rejected values and retryable failures both lead to a new attempt.
    When ``max_attempts`` is set, the outcome of the last attempt is
    returned (or raised) as is. Otherwise the loop only stops on an
    accepted value or a fatal failure.

    Args:
        max_attempts: Maximum number of attempts, initial attempt
            included, or ``None`` to retry forever. Must be >= 1.
        backoff: Optional schedule of delays between attempts. Without
            a schedule, the timer is asked for a zero wait, which lets other
            tasks run (and cancellations land) before the next attempt.
        timer: Timer used to wait between attempts. Defaults to
            ``AsyncioTimer()``.
        classifier: Optional failure classifier.
        on_retry: Optional callback invoked before each retry.
    """

    def __init__(
        self,
        max_attempts: int | None = None,
        backoff: BaseBackoffStrategy | None = None,
        timer: BaseTimer | None = None,
        classifier: FailureClassifier | None = None,
        on_retry: Callable[[RetryInfo], None] | None = None,
    ) -> None:
        validate_max_attempts(max_attempts)
        super().__init__(classifier=classifier)
        self.max_attempts = max_attempts
        self.backoff = backoff
        self.timer = timer if timer is not None else AsyncioTimer()
        self.on_retry = on_retry

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(max_attempts={self.max_attempts}, "
            f"backoff={self.backoff!r})"
        )

    async def _execute(
        self, operation: Callable[[], Awaitable[T]], success: Success[T]
    ) -> T:
        delays = self.backoff.delays() if self.backoff is not None else None
        countdown = Countdown.start(self.max_attempts) if self.max_attempts is not None else None
        attempt = 0
        while True:
            attempt += 1
            current = success if countdown is None else countdown.success(success)
            outcome = await self._attempt(operation, current)
            if outcome.accepted:
                logger.debug(f"Attempt {attempt} accepted")
                return outcome.result()
            if countdown is not None:
                if countdown.exhausted:
                    logger.debug(f"Giving up after {attempt} attempts")
                    return outcome.result()
                countdown = countdown.next()

            wait_time = next(delays) if delays is not None else 0.0
            if outcome.failed:
                logger.debug(f"Attempt {attempt} failed, will retry in {wait_time:.2f}s")
            else:
                logger.debug(f"Attempt {attempt} rejected, will retry in {wait_time:.2f}s")
            invoke_on_retry(
                self.on_retry,
                attempt=attempt,
                max_attempts=self.max_attempts,
                wait_time=wait_time,
                error=outcome.error,
                value=outcome.value,
            )
            # a zero wait still yields to the event loop between two attempts
            await self.timer.sleep(wait_time)
