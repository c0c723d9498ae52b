r"""Callback types and helpers for observing retries.

A policy accepts an optional ``on_retry`` callback that is invoked
before each retry, after the decision to retry was taken and before
the delay (if any) elapses. It is meant for logging, metrics, and
alerting.

Example:
    ```pycon
    >>> from aretry import Directly
    >>> from aretry.callbacks import RetryInfo
    >>> def log_retry(retry_info: RetryInfo) -> None:
    ...     print(f"Attempt {retry_info.attempt}/{retry_info.max_attempts}")
    ...
    >>> policy = Directly(max_attempts=3, on_retry=log_retry)

    ```
"""

from __future__ import annotations

__all__ = ["RetryInfo", "invoke_on_retry"]

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class RetryInfo:
    """Information passed to the on_retry callback.

    Attributes:
        attempt: The number of the upcoming attempt (1-indexed). The first
            retry is attempt 2.
        max_attempts: Maximum number of attempts, or ``None`` if unbounded.
        wait_time: The delay in seconds before the upcoming attempt.
        error: The exception raised by the previous attempt (if any).
        value: The value rejected by the success predicate (if any).
    """

    attempt: int
    max_attempts: int | None
    wait_time: float
    error: Exception | None = None
    value: Any = None


def invoke_on_retry(
    on_retry: Callable[[RetryInfo], None] | None,
    *,
    attempt: int,
    max_attempts: int | None,
    wait_time: float,
    error: Exception | None,
    value: Any,
) -> None:
    """Invoke on_retry callback if provided.

    Args:
        on_retry: Optional callback to invoke before each retry.
        attempt: The number of the attempt that just settled (1-indexed).
            The callback receives the number of the upcoming attempt.
        max_attempts: Maximum number of attempts, or ``None``.
        wait_time: The delay in seconds before the upcoming attempt.
        error: The exception that triggered the retry (if any).
        value: The rejected value that triggered the retry (if any).
    """
    if on_retry is not None:
        on_retry(
            RetryInfo(
                attempt=attempt + 1,
                max_attempts=max_attempts,
                wait_time=wait_time,
                error=error,
                value=value,
            )
        )
