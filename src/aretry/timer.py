r"""Timers used to suspend a retry chain between two attempts."""

from __future__ import annotations

__all__ = ["AsyncioTimer", "BaseTimer"]

import asyncio
from abc import ABC, abstractmethod


class BaseTimer(ABC):
    """Abstract base class for timers.

    A timer suspends the current task for a given duration without
    blocking the event loop. It is called once per retry, with a zero
    delay when the policy has no delay schedule.
    """

    @abstractmethod
    async def sleep(self, delay: float) -> None:
        """Suspend the current task.

        Args:
            delay: The duration of the suspension in seconds.
        """


class AsyncioTimer(BaseTimer):
    """Timer backed by ``asyncio.sleep``.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry.timer import AsyncioTimer
        >>> asyncio.run(AsyncioTimer().sleep(0.0))

        ```
    """

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    async def sleep(self, delay: float) -> None:
        await asyncio.sleep(delay)
