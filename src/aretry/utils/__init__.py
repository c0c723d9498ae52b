r"""Utility functions for the retry policies.

This package provides helper functions for validating policy and
backoff parameters.
"""

from __future__ import annotations

__all__ = ["validate_backoff_params", "validate_delay", "validate_max_attempts"]

from aretry.utils.validation import (
    validate_backoff_params,
    validate_delay,
    validate_max_attempts,
)
