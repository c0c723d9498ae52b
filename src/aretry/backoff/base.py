r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy produces the sequence of delays to wait between
    two consecutive attempts of an operation.
    """

    @abstractmethod
    def delays(self) -> Iterator[float]:
        """Return a new schedule of delays.

        Each call returns an independent iterator, so concurrent retry
        chains never share their progress.

        Returns:
            An iterator over the delays in seconds. The first value is
            the delay before the first retry.
        """
