r"""Base policy abstraction and the single-attempt retry step.

Every policy exposes the same entry point, ``apply``, which receives a
zero-argument supplier of an awaitable. The supplier is invoked once per
attempt so that each attempt is a fresh execution of the operation.
"""

from __future__ import annotations

__all__ = ["Attempt", "BasePolicy"]

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from aretry.classifier import FailureClassifier
from aretry.success import Success

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


@dataclass
class Attempt(Generic[T]):
    """Settled outcome of one invocation of the operation supplier.

    Attributes:
        value: The value produced by the attempt, if it did not fail.
        error: The retryable exception raised by the attempt (if any).
        accepted: ``True`` if the success predicate accepted ``value``.
    """

    value: T | None = None
    error: Exception | None = None
    accepted: bool = False

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def outcome(self) -> Any:
        """The exception if the attempt failed, otherwise the value."""
        return self.error if self.error is not None else self.value

    def result(self) -> T:
        """Return the settled value or re-raise the settled failure."""
        if self.error is not None:
            raise self.error
        return self.value


class BasePolicy(ABC):
    """Abstract base class for retry policies.

    A policy wraps an asynchronous operation and transparently retries
    it according to its strategy, until the success predicate accepts a
    value or the strategy's own termination rule fires. Fatal failures
    (see ``FailureClassifier``) always propagate immediately.

    Args:
        classifier: Optional failure classifier. Defaults to
            ``FailureClassifier()``.
    """

    def __init__(self, classifier: FailureClassifier | None = None) -> None:
        self.classifier = classifier if classifier is not None else FailureClassifier()

    async def apply(
        self,
        operation: Callable[[], Awaitable[T]],
        success: Success[T] | Callable[[T], bool] | None = None,
    ) -> T:
        """Run ``operation`` with the retry semantics of the policy.

        Args:
            operation: Zero-argument callable returning an awaitable. It
                is invoked exactly once per attempt.
            success: Optional success predicate. By default, every value
                is accepted and only failures are retried.

        Returns:
            The first value accepted by the success predicate, or the
            value of the last attempt of a bounded policy.

        Raises:
            Exception: The failure of the last attempt if the policy
                stopped on a failure, or any fatal failure.

        Example:
            ```pycon
            >>> import asyncio
            >>> from aretry import Directly
            >>> async def fetch() -> int:
            ...     return 42
            ...
            >>> asyncio.run(Directly(max_attempts=3).apply(fetch))
            42

            ```
        """
        return await self._execute(operation, Success.of(success))

    async def apply_awaitable(
        self,
        awaitable: Awaitable[T],
        success: Success[T] | Callable[[T], bool] | None = None,
    ) -> T:
        """Run an already-created awaitable with the policy.

        An awaitable settles only once, so there is nothing fresh to
        retry: it is awaited a single time and its outcome is returned, or
        its failure raised, whatever the policy. Use ``apply`` with a
        supplier to get a fresh execution per attempt.

        Args:
            awaitable: The coroutine, task, or future to await.
            success: Optional success predicate.

        Returns:
            The settled value of the awaitable.
        """
        attempt = await self._attempt(lambda: awaitable, Success.of(success))
        return attempt.result()

    async def _attempt(
        self, operation: Callable[[], Awaitable[T]], success: Success[T]
    ) -> Attempt[T]:
        """Invoke the supplier once and classify the settled outcome.

        Args:
            operation: The operation supplier.
            success: The success predicate used to evaluate the value.

        Returns:
            The settled attempt. Retryable failures are captured.

        Raises:
            BaseException: Any failure classified as fatal.
        """
        try:
            value = await operation()
        except BaseException as exc:
            if not self.classifier.is_retryable(exc):
                raise
            logger.debug(f"Attempt failed with {type(exc).__name__}: {exc}")
            return Attempt(error=exc)
        return Attempt(value=value, accepted=success.evaluate(value))

    @abstractmethod
    async def _execute(
        self, operation: Callable[[], Awaitable[T]], success: Success[T]
    ) -> T:
        """Run the strategy of the policy.

        Args:
            operation: The operation supplier.
            success: The normalized success predicate.

        Returns:
            The final value.
        """
