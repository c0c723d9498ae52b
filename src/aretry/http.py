r"""Helpers to retry HTTP calls made with httpx.

This module provides a success predicate for ``httpx.Response`` objects
and a ``When`` rule honoring the ``Retry-After`` header sent by servers
with rate-limiting or temporary-unavailability responses.

Example:
    ```pycon
    >>> import httpx
    >>> from aretry import When
    >>> from aretry.http import response_ok, retry_after_rule
    >>> policy = When(retry_after_rule(max_attempts=3))
    >>> async def fetch() -> httpx.Response:
    ...     async with httpx.AsyncClient() as client:
    ...         return await client.get("https://api.example.com/data")
    ...
    >>> response = await policy.apply(fetch, success=response_ok)  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "RETRY_STATUS_CODES",
    "parse_retry_after",
    "response_ok",
    "retry_after_rule",
]

import logging
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import TYPE_CHECKING, Any

import httpx

from aretry.config import DEFAULT_PAUSE_MAX_ATTEMPTS
from aretry.policy.backoff import Backoff
from aretry.policy.delayed import Delayed
from aretry.policy.pause import Pause
from aretry.policy.when import Rule

if TYPE_CHECKING:
    from aretry.policy.base import BasePolicy
    from aretry.timer import BaseTimer

logger: logging.Logger = logging.getLogger(__name__)

# HTTP status codes that are worth retrying
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)


def parse_retry_after(retry_after_header: str | None) -> float | None:
    """Parse the Retry-After header value from an HTTP response.

    The Retry-After header can be specified in two formats according to RFC 7231:
    1. An integer representing the number of seconds to wait (e.g., "120")
    2. An HTTP-date in RFC 5322 format (e.g., "Wed, 21 Oct 2015 07:28:00 GMT")

    Args:
        retry_after_header: The value of the Retry-After header as a string,
            or None if the header is not present in the response.

    Returns:
        The number of seconds to wait before retrying, or None if the
        header is absent or cannot be parsed. Signed, fractional, or
        non-finite values such as "-5", "1.5", "1e12", or "inf" are
        rejected. Dates in the past give 0.0.

    Example:
        ```pycon
        >>> from aretry.http import parse_retry_after
        >>> parse_retry_after("120")
        120.0
        >>> parse_retry_after(None) is None
        True
        >>> parse_retry_after("invalid") is None
        True

        ```
    """
    if retry_after_header is None:
        return None

    # delay-seconds is a non-negative run of ASCII digits (RFC 7231)
    value = retry_after_header.strip()
    if value.isascii() and value.isdigit():
        try:
            return float(int(value))
        except (ValueError, OverflowError):
            logger.debug(f"Retry-After delay is out of range: {retry_after_header!r}")
            return None

    try:
        retry_date: datetime = parsedate_to_datetime(retry_after_header)
        now = datetime.now(timezone.utc)
        return max(0.0, (retry_date - now).total_seconds())
    except (ValueError, TypeError, OverflowError):
        logger.debug(f"Failed to parse Retry-After header: {retry_after_header!r}")
        return None


def response_ok(response: httpx.Response) -> bool:
    """Success predicate accepting responses with a status code below 400.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretry.http import response_ok
        >>> response_ok(httpx.Response(200))
        True
        >>> response_ok(httpx.Response(503))
        False

        ```
    """
    return response.status_code < 400


def _extract_response(outcome: Any) -> httpx.Response | None:
    if isinstance(outcome, httpx.Response):
        return outcome
    if isinstance(outcome, httpx.HTTPStatusError):
        return outcome.response
    return None


def retry_after_rule(
    max_attempts: int | None = DEFAULT_PAUSE_MAX_ATTEMPTS,
    status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES,
    fallback: BasePolicy | None = None,
    timer: BaseTimer | None = None,
) -> Rule:
    """Return a ``When`` rule for retryable HTTP responses.

    The rule matches an ``httpx.Response`` (rejected by the success
    predicate) or an ``httpx.HTTPStatusError`` whose status code is in
    ``status_forcelist``. If the response carries a valid ``Retry-After``
    header, the rule waits for the requested delay and then retries with
    ``Pause(max_attempts, delay=<Retry-After>)``. Otherwise it uses
    ``fallback``, which defaults to ``Backoff(max_attempts)``.

    Args:
        max_attempts: Maximum number of attempts of the delegated policy.
        status_forcelist: Status codes that trigger a retry.
        fallback: Policy used when no usable Retry-After header is sent.
        timer: Optional timer used for the waits.

    Returns:
        The rule to pass to ``When``.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretry.http import retry_after_rule
        >>> rule = retry_after_rule()
        >>> rule.matches(httpx.Response(429, headers={"Retry-After": "2"}))
        True
        >>> rule.matches(httpx.Response(404))
        False
        >>> rule.resolve(httpx.Response(429, headers={"Retry-After": "2"}))
        Delayed(policy=Pause(max_attempts=4, backoff=ConstantBackoff(delay=2.0)), delay=2.0)

        ```
    """
    if fallback is None:
        fallback = Backoff(max_attempts=max_attempts, timer=timer)

    def matches(outcome: Any) -> bool:
        response = _extract_response(outcome)
        return response is not None and response.status_code in status_forcelist

    def select(outcome: Any) -> BasePolicy:
        response = _extract_response(outcome)
        delay = parse_retry_after(response.headers.get("Retry-After"))
        if delay is None:
            logger.debug(f"No usable Retry-After header, falling back to {fallback!r}")
            return fallback
        logger.debug(f"Server requested a retry after {delay:.2f}s")
        return Delayed(
            Pause(max_attempts=max_attempts, delay=delay, timer=timer), delay=delay, timer=timer
        )

    return Rule(matches=matches, policy=select)
