r"""Default configuration values for the retry policies.

This module centralizes the constants used as default arguments by the
policy constructors so that they can be imported and inspected.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BACKOFF_MAX_ATTEMPTS",
    "DEFAULT_BASE",
    "DEFAULT_DELAY",
    "DEFAULT_DIRECTLY_MAX_ATTEMPTS",
    "DEFAULT_MAX_DELAY",
    "DEFAULT_PAUSE_MAX_ATTEMPTS",
]

# Default delay in seconds between two attempts of Pause and Backoff
DEFAULT_DELAY = 0.5

# Default multiplier applied to the delay after each Backoff retry
DEFAULT_BASE = 2

# Default cap for the Backoff delay. None means the delay grows without bound
DEFAULT_MAX_DELAY: float | None = None

# Default number of attempts (initial attempt included) of the bounded policies
DEFAULT_DIRECTLY_MAX_ATTEMPTS = 3
DEFAULT_PAUSE_MAX_ATTEMPTS = 4
DEFAULT_BACKOFF_MAX_ATTEMPTS = 8
