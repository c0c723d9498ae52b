r"""Retry policies.

Public API:
    - BasePolicy: Interface shared by every policy
    - Directly: Retry immediately
    - Pause: Retry after a fixed pause
    - Backoff: Retry with exponential backoff
    - When: Delegate to a policy chosen from the outcome
    - Delayed: Wait once, then delegate to a policy
"""

from __future__ import annotations

__all__ = [
    "NO_MATCH",
    "Attempt",
    "Backoff",
    "BasePolicy",
    "Countdown",
    "Delayed",
    "Directly",
    "Pause",
    "RetryLoopPolicy",
    "Rule",
    "When",
    "on_exception",
    "on_value",
]

from aretry.policy.backoff import Backoff
from aretry.policy.base import Attempt, BasePolicy
from aretry.policy.counting import Countdown
from aretry.policy.delayed import Delayed
from aretry.policy.directly import Directly
from aretry.policy.loop import RetryLoopPolicy
from aretry.policy.pause import Pause
from aretry.policy.when import NO_MATCH, Rule, When, on_exception, on_value
