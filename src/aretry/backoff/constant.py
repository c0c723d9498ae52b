r"""Constant backoff strategy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

import itertools
from typing import TYPE_CHECKING

from aretry.backoff.base import BaseBackoffStrategy
from aretry.config import DEFAULT_DELAY
from aretry.utils.validation import validate_delay

if TYPE_CHECKING:
    from collections.abc import Iterator


class ConstantBackoff(BaseBackoffStrategy):
    """Constant/fixed backoff strategy.

    Waits the same delay before every retry attempt.

    Args:
        delay: The fixed delay in seconds (default: 0.5).

    Example:
        ```pycon
        >>> import itertools
        >>> from aretry.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff(delay=2.5)
        >>> list(itertools.islice(backoff.delays(), 3))
        [2.5, 2.5, 2.5]

        ```
    """

    def __init__(self, delay: float = DEFAULT_DELAY) -> None:
        validate_delay(delay)
        self.delay = delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay})"

    def delays(self) -> Iterator[float]:
        return itertools.repeat(self.delay)
