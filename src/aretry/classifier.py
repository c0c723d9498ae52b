r"""Classification of failures into retryable and fatal ones.

Fatal failures are conditions a process cannot recover from in place.
They always escape the retry loop, whatever the policy and the remaining
attempts.
"""

from __future__ import annotations

__all__ = ["DEFAULT_FATAL_EXCEPTIONS", "FailureClassifier"]

import logging

logger: logging.Logger = logging.getLogger(__name__)

# Exception subclasses that must never be retried. Every BaseException that
# is not an Exception (KeyboardInterrupt, SystemExit, GeneratorExit,
# asyncio.CancelledError) is fatal as well.
DEFAULT_FATAL_EXCEPTIONS: tuple[type[BaseException], ...] = (
    MemoryError,
    RecursionError,
    SystemError,
)


class FailureClassifier:
    """Decides whether a failure can be retried.

    Args:
        fatal: Exception types considered fatal in addition to every
            ``BaseException`` that does not derive from ``Exception``.

    Example:
        ```pycon
        >>> from aretry import FailureClassifier
        >>> classifier = FailureClassifier()
        >>> classifier.is_retryable(ValueError("boom"))
        True
        >>> classifier.is_retryable(MemoryError())
        False
        >>> classifier = FailureClassifier(fatal=(KeyError,))
        >>> classifier.is_retryable(KeyError("key"))
        False

        ```
    """

    def __init__(
        self, fatal: tuple[type[BaseException], ...] = DEFAULT_FATAL_EXCEPTIONS
    ) -> None:
        self.fatal = tuple(fatal)

    def __repr__(self) -> str:
        names = ", ".join(exc.__name__ for exc in self.fatal)
        return f"{self.__class__.__qualname__}(fatal=({names}))"

    def is_fatal(self, exc: BaseException) -> bool:
        """Return ``True`` if the failure must propagate immediately."""
        if not isinstance(exc, Exception):
            return True
        return isinstance(exc, self.fatal)

    def is_retryable(self, exc: BaseException) -> bool:
        """Return ``True`` if the failure is eligible for a retry."""
        retryable = not self.is_fatal(exc)
        if not retryable:
            logger.debug(f"{type(exc).__name__} is fatal and will not be retried")
        return retryable
