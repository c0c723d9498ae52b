r"""Policy waiting once before delegating to another policy."""

from __future__ import annotations

__all__ = ["Delayed"]

import logging
from typing import TYPE_CHECKING, TypeVar

from aretry.policy.base import BasePolicy
from aretry.timer import AsyncioTimer
from aretry.utils.validation import validate_delay

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.success import Success
    from aretry.timer import BaseTimer

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class Delayed(BasePolicy):
    """Wait ``delay`` seconds, then run ``policy``.

    This is typically the target of a ``When`` rule that honors a
    server directive such as an HTTP ``Retry-After`` header: the
    delegated policy's first attempt only starts once the requested
    delay has elapsed.

    Args:
        policy: The policy to run after the delay.
        delay: The delay in seconds.
        timer: Timer used to wait. Defaults to ``AsyncioTimer()``.
    """

    def __init__(
        self, policy: BasePolicy, delay: float, timer: BaseTimer | None = None
    ) -> None:
        validate_delay(delay)
        super().__init__(classifier=policy.classifier)
        self.policy = policy
        self.delay = delay
        self.timer = timer if timer is not None else AsyncioTimer()

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(policy={self.policy!r}, delay={self.delay})"

    async def _execute(
        self, operation: Callable[[], Awaitable[T]], success: Success[T]
    ) -> T:
        logger.debug(f"Waiting {self.delay:.2f}s before delegating to {self.policy!r}")
        await self.timer.sleep(self.delay)
        return await self.policy.apply(operation, success)
