r"""aretry - Composable retry policies for asyncio.

This package wraps an asynchronous, possibly failing operation with a
policy deciding whether, when, and how many times to retry it. Every
policy exposes the same ``apply`` coroutine, which takes a zero-argument
supplier of an awaitable and an optional success predicate.

Key Features:
    - Immediate, paused, and exponential backoff retries
    - Bounded (``max_attempts``) and unbounded (``forever()``) variants
    - Success predicates to retry on unsatisfying values
    - Conditional dispatch to another policy based on the outcome
    - Configurable classification of fatal failures
    - Retry-After aware rules for httpx responses

Example:
    ```pycon
    >>> import asyncio
    >>> from aretry import Backoff, Directly
    >>> async def fetch() -> int:
    ...     return 42
    ...
    >>> asyncio.run(Directly(max_attempts=3).apply(fetch))
    42
    >>> # Retry until the value is large enough
    >>> asyncio.run(Backoff(max_attempts=2, delay=0.0).apply(fetch, success=lambda v: v > 10))
    42

    ```
"""

from __future__ import annotations

__all__ = [
    "Backoff",
    "BasePolicy",
    "Delayed",
    "Directly",
    "FailureClassifier",
    "Pause",
    "Success",
    "When",
    "__version__",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.classifier import FailureClassifier
from aretry.policy import Backoff, BasePolicy, Delayed, Directly, Pause, When
from aretry.success import Success

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
