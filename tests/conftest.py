"""Pytest configuration and shared fixtures.

Settings are read at import time, so the test environment is selected
here, before any taskboard module is imported by a test module.
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")

from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402

from taskboard.infrastructure.authorization import PermissionMatrixAdapter  # noqa: E402


@pytest.fixture
def mock_logger() -> MagicMock:
    """LoggerProtocol double recording every call."""
    return MagicMock()


@pytest.fixture
def authorization(mock_logger: MagicMock) -> PermissionMatrixAdapter:
    """Authorization adapter over the real table with a mocked logger."""
    return PermissionMatrixAdapter(mock_logger)
