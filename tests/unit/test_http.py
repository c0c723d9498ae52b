r"""Unit tests for the httpx helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest

from aretry import Backoff, Delayed, Pause, When
from aretry.http import RETRY_STATUS_CODES, parse_retry_after, response_ok, retry_after_rule

if TYPE_CHECKING:
    from tests.conftest import RecordingTimer


def make_status_error(status_code: int, headers: dict[str, str] | None = None) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", "https://example.com")
    response = httpx.Response(status_code, headers=headers, request=request)
    return httpx.HTTPStatusError(f"status {status_code}", request=request, response=response)


#######################################
#     Tests for parse_retry_after     #
#######################################


@pytest.mark.parametrize(
    ("header", "seconds"), [("1", 1.0), ("0", 0.0), ("120", 120.0), ("3600", 3600.0)]
)
def test_parse_retry_after_integer(header: str, seconds: float) -> None:
    """Test parsing Retry-After header with integer seconds."""
    assert parse_retry_after(header) == seconds


@pytest.mark.parametrize("header", [None, "invalid", "not a number", "1.2.3"])
def test_parse_retry_after_none(header: str | None) -> None:
    """Test parsing missing or invalid Retry-After header."""
    assert parse_retry_after(header) is None


@pytest.mark.parametrize("header", ["-5", "+5", "1.5", "1e12", "inf", "nan", "\u00b2", "9" * 400])
def test_parse_retry_after_rejects_non_digit_seconds(header: str) -> None:
    """Test that only plain digit delay-seconds values are accepted."""
    assert parse_retry_after(header) is None


def test_parse_retry_after_strips_whitespace() -> None:
    """Test that surrounding whitespace is ignored."""
    assert parse_retry_after(" 30 ") == 30.0


def test_retry_after_rule_ignores_infinite_delay() -> None:
    """Test that a non-finite Retry-After value falls back to the default policy."""
    policy = retry_after_rule().resolve(httpx.Response(503, headers={"Retry-After": "inf"}))
    assert isinstance(policy, Backoff)


def test_parse_retry_after_http_date() -> None:
    """Test parsing Retry-After header with HTTP-date format."""
    mock_datetime = Mock(
        spec=datetime,
        now=Mock(return_value=datetime(2015, 10, 21, 7, 28, 0, tzinfo=timezone.utc)),
    )
    with patch("aretry.http.datetime", mock_datetime):
        result = parse_retry_after("Wed, 21 Oct 2015 07:29:00 GMT")
    assert result is not None
    assert 59.0 <= result <= 61.0


def test_parse_retry_after_http_date_in_past() -> None:
    """Test that an HTTP-date in the past gives a zero delay."""
    assert parse_retry_after("Wed, 21 Oct 2015 07:28:00 GMT") == 0.0


#################################
#     Tests for response_ok     #
#################################


@pytest.mark.parametrize("status_code", [200, 201, 204, 301])
def test_response_ok_true(status_code: int) -> None:
    """Test that responses below 400 are accepted."""
    assert response_ok(httpx.Response(status_code))


@pytest.mark.parametrize("status_code", [400, 404, 429, 500, 503])
def test_response_ok_false(status_code: int) -> None:
    """Test that error responses are rejected."""
    assert not response_ok(httpx.Response(status_code))


######################################
#     Tests for retry_after_rule     #
######################################


def test_retry_status_codes() -> None:
    """Test the default retryable status codes."""
    assert RETRY_STATUS_CODES == (429, 500, 502, 503, 504)


@pytest.mark.parametrize("status_code", RETRY_STATUS_CODES)
def test_retry_after_rule_matches_response(status_code: int) -> None:
    """Test that retryable responses match."""
    assert retry_after_rule().matches(httpx.Response(status_code))


@pytest.mark.parametrize("status_code", [200, 400, 404])
def test_retry_after_rule_ignores_response(status_code: int) -> None:
    """Test that other responses do not match."""
    assert not retry_after_rule().matches(httpx.Response(status_code))


def test_retry_after_rule_matches_status_error() -> None:
    """Test matching httpx.HTTPStatusError failures."""
    rule = retry_after_rule()
    assert rule.matches(make_status_error(503))
    assert not rule.matches(make_status_error(404))
    assert not rule.matches(ConnectionError())


def test_retry_after_rule_custom_status_forcelist() -> None:
    """Test a custom status_forcelist."""
    rule = retry_after_rule(status_forcelist=(418,))
    assert rule.matches(httpx.Response(418))
    assert not rule.matches(httpx.Response(503))


def test_retry_after_rule_resolve_with_header() -> None:
    """Test that a Retry-After header gives a delayed Pause."""
    policy = retry_after_rule(max_attempts=2).resolve(
        httpx.Response(429, headers={"Retry-After": "5"})
    )
    assert isinstance(policy, Delayed)
    assert policy.delay == 5.0
    assert isinstance(policy.policy, Pause)
    assert policy.policy.delay == 5.0
    assert policy.policy.max_attempts == 2


def test_retry_after_rule_resolve_without_header() -> None:
    """Test the Backoff fallback without Retry-After header."""
    policy = retry_after_rule(max_attempts=2).resolve(httpx.Response(503))
    assert isinstance(policy, Backoff)
    assert policy.max_attempts == 2


def test_retry_after_rule_custom_fallback() -> None:
    """Test a custom fallback policy."""
    fallback = Pause(delay=0.1)
    assert retry_after_rule(fallback=fallback).resolve(make_status_error(500)) is fallback


@pytest.mark.asyncio
async def test_retry_after_rule_end_to_end(timer: RecordingTimer) -> None:
    """Test honoring Retry-After before retrying a rate-limited request."""
    ok = httpx.Response(200)
    operation = AsyncMock(
        side_effect=[httpx.Response(429, headers={"Retry-After": "1"}), httpx.Response(503), ok]
    )
    policy = When(retry_after_rule(max_attempts=3, timer=timer))
    assert await policy.apply(operation, success=response_ok) is ok
    assert operation.call_count == 3
    assert timer.delays == [1.0, 1.0]


@pytest.mark.asyncio
async def test_retry_after_rule_status_error(timer: RecordingTimer) -> None:
    """Test retrying an HTTPStatusError without Retry-After header."""
    operation = AsyncMock(side_effect=[make_status_error(503), "payload"])
    policy = When(retry_after_rule(max_attempts=2, timer=timer))
    assert await policy.apply(operation) == "payload"
    assert operation.call_count == 2
    assert timer.delays == []
