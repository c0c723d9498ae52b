r"""Unit tests for timers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from aretry.timer import AsyncioTimer

if TYPE_CHECKING:
    from unittest.mock import Mock


@pytest.mark.asyncio
async def test_asyncio_timer_sleep(mock_asleep: Mock) -> None:
    """Test that AsyncioTimer delegates to asyncio.sleep."""
    await AsyncioTimer().sleep(1.5)
    mock_asleep.assert_called_once_with(1.5)


@pytest.mark.asyncio
async def test_asyncio_timer_sleep_zero() -> None:
    """Test that a zero delay returns immediately."""
    await AsyncioTimer().sleep(0.0)


def test_asyncio_timer_repr() -> None:
    """Test the string representation."""
    assert repr(AsyncioTimer()) == "AsyncioTimer()"
