from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock, patch

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to detect unexpected waits on the sync path."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def always_fails() -> Mock:
    """Create a callback that always raises the same RuntimeError."""
    return Mock(side_effect=RuntimeError("boom"))


@pytest.fixture
def always_fails_async() -> AsyncMock:
    """Create an async callback that always raises the same
    RuntimeError."""
    return AsyncMock(side_effect=RuntimeError("boom"))
