r"""Policy retrying immediately, without any delay."""

from __future__ import annotations

__all__ = ["Directly"]

from typing import TYPE_CHECKING

from aretry.config import DEFAULT_DIRECTLY_MAX_ATTEMPTS
from aretry.policy.loop import RetryLoopPolicy

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.callbacks import RetryInfo
    from aretry.classifier import FailureClassifier


class Directly(RetryLoopPolicy):
    """Retry immediately after a failure or a rejected value.

    Args:
        max_attempts: Maximum number of attempts, initial attempt
            included (default: 3). ``None`` retries forever.
        classifier: Optional failure classifier.
        on_retry: Optional callback invoked before each retry.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import Directly
        >>> calls = []
        >>> async def flaky() -> int:
        ...     calls.append(1)
        ...     if len(calls) < 3:
        ...         raise ConnectionError("unavailable")
        ...     return 42
        ...
        >>> asyncio.run(Directly(max_attempts=3).apply(flaky))
        42
        >>> len(calls)
        3

        ```
    """

    def __init__(
        self,
        max_attempts: int | None = DEFAULT_DIRECTLY_MAX_ATTEMPTS,
        classifier: FailureClassifier | None = None,
        on_retry: Callable[[RetryInfo], None] | None = None,
    ) -> None:
        super().__init__(max_attempts=max_attempts, classifier=classifier, on_retry=on_retry)

    @classmethod
    def forever(
        cls,
        classifier: FailureClassifier | None = None,
        on_retry: Callable[[RetryInfo], None] | None = None,
    ) -> Directly:
        """Retry immediately until a value is accepted.

        The operation is retried on every retryable failure, so an
        operation that always fails keeps the loop running forever.
        """
        return cls(max_attempts=None, classifier=classifier, on_retry=on_retry)
