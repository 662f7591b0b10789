"""Shared test configuration and fixtures for all tests."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.benchmark.progress import RecordingProgressObserver
from .factories import make_status_error
from .test_const import HTTP_PAYMENT_REQUIRED


@pytest.fixture
def recording_observer():
    """Progress observer that records every call."""
    return RecordingProgressObserver()


@pytest.fixture
def mock_client():
    """Mock resource client whose get() succeeds."""
    client = MagicMock()
    client.get = AsyncMock(return_value={"data": "ok"})
    return client


@pytest.fixture
def payment_required_client():
    """Mock resource client whose get() always fails with 402."""
    client = MagicMock()
    client.get = AsyncMock(side_effect=make_status_error(HTTP_PAYMENT_REQUIRED))
    return client
