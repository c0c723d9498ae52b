r"""Delay schedules used between two retry attempts.

This package provides the constant and exponential backoff schedules
used by the Pause and Backoff policies.
"""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy", "ConstantBackoff", "ExponentialBackoff"]

from aretry.backoff.base import BaseBackoffStrategy
from aretry.backoff.constant import ConstantBackoff
from aretry.backoff.exponential import ExponentialBackoff
