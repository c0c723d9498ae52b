r"""Parameter validation utilities for the retry policies.

This module provides validation functions to ensure the policy and
backoff parameters meet the required constraints before being used.
"""

from __future__ import annotations

__all__ = ["validate_backoff_params", "validate_delay", "validate_max_attempts"]


def validate_max_attempts(max_attempts: int | None) -> None:
    """Validate the maximum number of attempts.

    Args:
        max_attempts: The maximum number of attempts, initial attempt
            included. ``None`` means unbounded. Must be >= 1 otherwise.

    Raises:
        ValueError: If ``max_attempts`` is lower than 1.

    Example:
        ```pycon
        >>> from aretry.utils import validate_max_attempts
        >>> validate_max_attempts(3)
        >>> validate_max_attempts(None)
        >>> validate_max_attempts(0)  # doctest: +SKIP

        ```
    """
    if max_attempts is not None and max_attempts < 1:
        msg = f"max_attempts must be >= 1, got {max_attempts}"
        raise ValueError(msg)


def validate_delay(delay: float) -> None:
    """Validate a delay expressed in seconds.

    Args:
        delay: The delay in seconds. Must be >= 0.

    Raises:
        ValueError: If ``delay`` is negative.
    """
    if delay < 0:
        msg = f"delay must be non-negative, got {delay}"
        raise ValueError(msg)


def validate_backoff_params(delay: float, base: int, max_delay: float | None) -> None:
    """Validate exponential backoff parameters.

    Args:
        delay: The initial delay in seconds. Must be >= 0.
        base: The multiplier applied after each retry. Must be >= 1.
        max_delay: Optional cap in seconds. Must be > 0 and >= ``delay``
            if provided.

    Raises:
        ValueError: If one of the parameters is invalid.

    Example:
        ```pycon
        >>> from aretry.utils import validate_backoff_params
        >>> validate_backoff_params(delay=0.1, base=2, max_delay=None)
        >>> validate_backoff_params(delay=0.1, base=2, max_delay=1.0)

        ```
    """
    validate_delay(delay)
    if base < 1:
        msg = f"base must be >= 1, got {base}"
        raise ValueError(msg)
    if max_delay is not None:
        if max_delay <= 0:
            msg = f"max_delay must be positive if specified, got {max_delay}"
            raise ValueError(msg)
        if delay > max_delay:
            msg = f"delay ({delay}) must not exceed max_delay ({max_delay})"
            raise ValueError(msg)
